"""
cauchy_mcmc

Unit tests for Proposal classes.

Created on Oct 17, 2026
"""

import unittest

import numpy as np
import scipy.stats

from cauchy_mcmc.posterior import CauchyHypothesis
from cauchy_mcmc.proposal import *


class ProposalTest(unittest.TestCase):
    def test_default_sd(self):
        p = GaussianRandomWalkProposal()
        self.assertEqual(p.sd, DEFAULT_PROPOSAL_SD)

    def test_invalid_sd(self):
        self.assertRaises(ConfigurationError, GaussianRandomWalkProposal, {'PROPOSAL_SD': 0.0})
        self.assertRaises(ConfigurationError, GaussianRandomWalkProposal, {'PROPOSAL_SD': -1.0})
        self.assertRaises(ConfigurationError, GaussianRandomWalkProposal, {'PROPOSAL_SD': np.nan})
        self.assertRaises(ConfigurationError, GaussianRandomWalkProposal, {})

    def test_propose(self):
        p = GaussianRandomWalkProposal({'PROPOSAL_SD': 2.0})
        rng = np.random.default_rng(3)
        h = CauchyHypothesis(theta=1.0)
        move, hp, q_hp_h, q_h_hp = p.propose(h, rng)
        self.assertEqual(move, 'random_walk')
        # h is not modified
        self.assertEqual(h.theta, 1.0)
        self.assertNotEqual(hp.theta, h.theta)
        self.assertAlmostEqual(q_hp_h, scipy.stats.norm.pdf(hp.theta - 1.0, scale=2.0))
        self.assertAlmostEqual(q_hp_h, q_h_hp)

    def test_step_distribution(self):
        p = GaussianRandomWalkProposal({'PROPOSAL_SD': 0.5})
        rng = np.random.default_rng(0)
        h = CauchyHypothesis(theta=-3.0)
        steps = np.array([p.propose(h, rng)[1].theta for i in range(5000)]) + 3.0
        self.assertAlmostEqual(np.mean(steps), 0.0, delta=0.05)
        self.assertAlmostEqual(np.std(steps), 0.5, delta=0.05)

    def test_abstract_proposal(self):
        p = Proposal(params=None)
        self.assertRaises(NotImplementedError, p.propose, None, None)
