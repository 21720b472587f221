"""
cauchy_mcmc

This file contains the MHSampler (Metropolis-Hastings) sampler

Created on Oct 17, 2026
"""

import numpy as np

from cauchy_mcmc.mcmc_run import MCMCRun
from cauchy_mcmc.proposal import GaussianRandomWalkProposal
from cauchy_mcmc.sampler import Sampler


def acceptance_ratio(p_h, p_hp, q_hp_h, q_h_hp):
    """
    Calculate the Metropolis-Hastings acceptance ratio

        a(h -> hp) = (p(hp) q(h|hp)) / (p(h) q(hp|h))

    Posterior values may underflow to 0. Then the ratio is NaN (0/0) or inf (x/0); callers reject on NaN.
    """
    with np.errstate(divide='ignore', invalid='ignore', over='ignore', under='ignore'):
        return np.float64(p_hp) * np.float64(q_h_hp) / (np.float64(p_h) * np.float64(q_hp_h))


class MHSampler(Sampler):
    """
    Metropolis-Hastings sampler class.
    """

    def __init__(self, initial_h, data, iteration_count, proposal=None, burn_in=0, thinning_period=1,
                 best_sample_count=10, report_period=1000, verbose=False, random_state=None):
        """
        Metropolis-Hastings sampler constructor

        initial_h: Initial hypothesis (CauchyHypothesis instance)
        data: observed data. Passed to Hypothesis.posterior function
        iteration_count: Number of iterations
        proposal: Proposal instance. Defaults to a Gaussian random walk with standard deviation 1.
        burn_in: Number of burn-in iterations
        thinning_period: Number of samples to discard before getting the next sample
        best_sample_count: Number of highest probability samples to keep
        report_period: Number of iterations to report sampler status.
        verbose: Reporting verbosity
        random_state: seed or numpy Generator
        """
        Sampler.__init__(self, initial_h, data, iteration_count, burn_in, thinning_period, best_sample_count,
                         report_period, verbose, random_state)
        if proposal is None:
            proposal = GaussianRandomWalkProposal()
        self.proposal = proposal

    def sample(self):
        """
        Sample from the posterior given data using MH algorithm
        """
        h = self.initial_h.copy()
        p_h = h.posterior(self.data)

        run = MCMCRun(info={"Sampler": "MHSampler", "Proposal": self.proposal.params},
                      chain_length=self.iteration_count + 1, log_row_count=self.iteration_count,
                      best_sample_count=self.best_sample_count, burn_in=self.burn_in,
                      log_columns=['Iteration', 'IsAccepted', 'Posterior', 'Proposal', 'AcceptanceRatio',
                                   'MoveType'])
        self.collect(run, 0, h, p_h, 'initial')

        accepted_count = 0
        if self.verbose:
            print("MHSampler Start\n")
        for i in range(1, self.iteration_count + 1):

            # propose next state
            move_type, hp, q_hp_h, q_h_hp = self.proposal.propose(h, self.rng)

            # calculate acceptance ratio
            # note that we already have p(h), we only calculate p(hp)
            p_hp = hp.posterior(self.data)
            a_hp_h = acceptance_ratio(p_h, p_hp, q_hp_h, q_h_hp)

            is_accepted = 0
            # accept/reject. NaN ratio (underflow on both sides) is a reject.
            if not np.isnan(a_hp_h) and self.rng.uniform() < a_hp_h:
                is_accepted = 1
                accepted_count += 1
                h = hp
                p_h = p_hp

            run.record_log({'Iteration': i, 'IsAccepted': is_accepted, 'Posterior': p_h, 'Proposal': hp.theta,
                            'AcceptanceRatio': a_hp_h, 'MoveType': move_type})
            self.collect(run, i, h, p_h, move_type)
            self.report(i, h, p_h)

        run.finish()
        if self.verbose:
            print("Sampling finished. Acceptance rate: {0:f}\n".format(float(accepted_count) / self.iteration_count))
        return run
