"""
cauchy_mcmc

This file contains the SliceSampler class.

One iteration draws a level s ~ Uniform(0, p(theta)) under the current state and then draws the next state uniformly
from the super-level set {theta : p(theta) >= s} with RejectionIntervalSampler. When s is small the super-level set
spans several modes, which lets the chain jump between them.

Created on Oct 17, 2026
"""

from cauchy_mcmc.exceptions import ConfigurationError, DegenerateLevelError, RetryExhaustedError
from cauchy_mcmc.mcmc_run import MCMCRun
from cauchy_mcmc.posterior import CauchyHypothesis, cauchy_posterior
from cauchy_mcmc.rejection import DEFAULT_MAX_RETRIES, RejectionIntervalSampler
from cauchy_mcmc.sampler import Sampler

DEFAULT_MAX_LEVEL_DRAWS = 1000


class SliceSampler(Sampler):
    """
    Slice sampler class.
    """

    def __init__(self, initial_h, data, iteration_count, burn_in=0, thinning_period=1, best_sample_count=10,
                 report_period=1000, verbose=False, random_state=None, max_retries=DEFAULT_MAX_RETRIES,
                 max_level_draws=DEFAULT_MAX_LEVEL_DRAWS):
        """
        Slice sampler constructor

        initial_h: Initial hypothesis (CauchyHypothesis instance)
        data: observed data
        iteration_count: Number of iterations
        burn_in: Number of burn-in iterations
        thinning_period: Number of samples to discard before getting the next sample
        best_sample_count: Number of highest probability samples to keep
        report_period: Number of iterations to report sampler status.
        verbose: Reporting verbosity
        random_state: seed or numpy Generator
        max_retries: Maximum number of rejection sampling candidates per iteration
        max_level_draws: Maximum number of level draws per iteration. A level of exactly 0, or one so small
            that its enclosing interval is not finite, is redrawn.
        """
        Sampler.__init__(self, initial_h, data, iteration_count, burn_in, thinning_period, best_sample_count,
                         report_period, verbose, random_state)
        if max_level_draws < 1:
            raise ConfigurationError("max_level_draws has to be at least 1.")
        self.max_level_draws = int(max_level_draws)
        # levels are drawn under p(theta), so the chain cannot start where the posterior underflows to 0
        if not cauchy_posterior(self.initial_h.theta, self.data) > 0.0:
            raise ConfigurationError("Posterior of initial theta={0:e} underflows to 0.".format(self.initial_h.theta))
        self.interval_sampler = RejectionIntervalSampler(self.data, max_retries=max_retries)

    def step(self, h, p_h):
        """Make one slice sampling transition from state h.

        Args:
            h (CauchyHypothesis): current state
            p_h (float): posterior value of h

        Returns:
            tuple: (next state, its posterior value, log row)
        """
        for level_draws in range(1, self.max_level_draws + 1):
            level = self.rng.uniform(0.0, p_h)
            try:
                theta, p, candidates, (low, high) = self.interval_sampler.sample(level, self.rng)
            except DegenerateLevelError:
                continue
            hp = CauchyHypothesis(theta)
            row = {'Level': level, 'LevelDraws': level_draws, 'Candidates': candidates, 'IntervalLow': low,
                   'IntervalHigh': high, 'Posterior': p}
            return hp, p, row

        raise RetryExhaustedError("No usable level in {0:d} draws. Posterior of current state theta={1:e} "
                                  "is {2:e}.".format(self.max_level_draws, h.theta, p_h))

    def sample(self):
        """
        Sample from the posterior given data using slice sampling
        """
        h = self.initial_h.copy()
        p_h = h.posterior(self.data)

        run = MCMCRun(info={"Sampler": "SliceSampler"}, chain_length=self.iteration_count + 1,
                      log_row_count=self.iteration_count, best_sample_count=self.best_sample_count,
                      burn_in=self.burn_in,
                      log_columns=['Iteration', 'Level', 'LevelDraws', 'Candidates', 'IntervalLow', 'IntervalHigh',
                                   'Posterior'])
        self.collect(run, 0, h, p_h, 'initial')

        candidate_count = 0
        if self.verbose:
            print("SliceSampler Start\n")
        for i in range(1, self.iteration_count + 1):
            h, p_h, row = self.step(h, p_h)
            candidate_count += row['Candidates']
            row['Iteration'] = i
            run.record_log(row)
            self.collect(run, i, h, p_h, 'slice')
            self.report(i, h, p_h)

        run.finish()
        if self.verbose:
            print("Sampling finished. Candidates per iteration: {0:f}\n".format(float(candidate_count) /
                                                                              self.iteration_count))
        return run
