"""
cauchy_mcmc

This file contains the abstract Proposal class and the Gaussian random walk
proposal used by the Metropolis-Hastings sampler.

Created on Oct 17, 2026
"""

import numpy as np
import scipy.stats

from cauchy_mcmc.exceptions import ConfigurationError

DEFAULT_PROPOSAL_SD = 1.0


class Proposal(object):
    """
    Proposal class implements MCMC moves (i.e., proposals) on Hypothesis.
    This is an abstract class specifying the template for Proposal classes.
    Propose method is called by MHSampler to get the next proposed hypothesis.
    """

    def __init__(self, params):
        self.params = params

    def propose(self, h, rng):
        """
        Proposes a new hypothesis based on h using random number generator rng
        Returns (information string, new hypothesis, probability of move, probability of reverse move)
        """
        raise NotImplementedError()


class GaussianRandomWalkProposal(Proposal):
    """
    GaussianRandomWalkProposal proposes theta' ~ Normal(theta, sd).
    The move is symmetric but both directions are evaluated, so MHSampler sees
    q(hp|h) and q(h|hp) computed the same way for any proposal.
    """

    def __init__(self, params=None):
        """
        :param params: a dictionary with key PROPOSAL_SD, the standard deviation of the step.
            Defaults to {'PROPOSAL_SD': 1.0}.
        :return: GaussianRandomWalkProposal instance
        """
        if params is None:
            params = {'PROPOSAL_SD': DEFAULT_PROPOSAL_SD}
        if 'PROPOSAL_SD' not in params:
            raise ConfigurationError("PROPOSAL_SD has to be specified.")
        sd = params['PROPOSAL_SD']
        if not np.isfinite(sd) or sd <= 0:
            raise ConfigurationError("Proposal standard deviation has to be positive. Got {0}".format(sd))
        Proposal.__init__(self, params)
        self.sd = float(sd)

    def propose(self, h, rng):
        """
        Propose a new hypothesis by adding a Gaussian step to theta.
        :param h: Current hypothesis
        :param rng: numpy Generator
        :return: 4-tuple consisting of (move name, new hypothesis, p(new h|h), p(h|new h))
        """
        hp = h.copy()
        hp.theta = h.theta + rng.normal(0.0, self.sd)
        q_hp_h = scipy.stats.norm.pdf(hp.theta, loc=h.theta, scale=self.sd)
        q_h_hp = scipy.stats.norm.pdf(h.theta, loc=hp.theta, scale=self.sd)
        return 'random_walk', hp, q_hp_h, q_h_hp
