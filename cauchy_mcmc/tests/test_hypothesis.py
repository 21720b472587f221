"""
cauchy_mcmc

Unit tests for Hypothesis class.
There isn't much to test here. We test the posterior caching mechanism.

Created on Oct 17, 2026
"""

import unittest

import numpy as np

from cauchy_mcmc.hypothesis import *


class DummyHypothesis(Hypothesis):
    def _calculate_posterior(self, data=None):
        return np.random.rand()


class HypothesisTest(unittest.TestCase):
    def setUp(self):
        self.h = DummyHypothesis()

    def tearDown(self):
        self.h = None

    def test_posterior_caching(self):
        val1 = self.h.posterior()
        val2 = self.h.posterior()
        self.assertEqual(val1, val2)

    def test_abstract_methods(self):
        h = Hypothesis()
        self.assertRaises(NotImplementedError, h.posterior)
        self.assertRaises(NotImplementedError, h.copy)
