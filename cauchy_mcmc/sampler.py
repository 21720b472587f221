"""
cauchy_mcmc

This file contains the abstract Sampler class.

Created on Oct 17, 2026
"""

import numbers

import numpy as np

from cauchy_mcmc.exceptions import ConfigurationError
from cauchy_mcmc.posterior import check_observations
from cauchy_mcmc.random_state import get_random_state


class Sampler(object):
    """
    Abstract Sampler class.
    """

    def __init__(self, initial_h, data, iteration_count, burn_in=0, thinning_period=1, best_sample_count=10,
                 report_period=1000, verbose=False, random_state=None):
        """
        Initialize sampler.

        initial_h: Initial hypothesis (CauchyHypothesis instance). Its theta is the first entry of the chain.
        data: observed data. Passed to Hypothesis.posterior function
        iteration_count: Number of iterations. The chain has iteration_count + 1 states.
        burn_in: Number of initial iterations excluded from samples and probability estimates
        thinning_period: Number of iterations between two collected samples
        best_sample_count: Number of highest probability samples to keep
        report_period: Number of iterations to report sampler status.
        verbose: Reporting verbosity
        random_state: None, an int seed, a SeedSequence or a numpy Generator
        """
        if not isinstance(iteration_count, numbers.Integral) or iteration_count <= 0:
            raise ConfigurationError("iteration_count has to be a positive integer. Got {0!r}".format(iteration_count))
        if burn_in < 0:
            raise ConfigurationError("burn_in cannot be negative.")
        if thinning_period < 1:
            raise ConfigurationError("thinning_period has to be at least 1.")
        if best_sample_count < 0:
            raise ConfigurationError("best_sample_count cannot be negative.")
        if report_period < 1:
            raise ConfigurationError("report_period has to be at least 1.")
        if not np.isfinite(initial_h.theta):
            raise ConfigurationError("Initial theta has to be finite.")

        self.initial_h = initial_h
        self.data = check_observations(data)
        self.iteration_count = int(iteration_count)
        self.burn_in = burn_in
        self.thinning_period = thinning_period
        self.best_sample_count = best_sample_count
        self.report_period = report_period
        self.verbose = verbose
        self.rng = get_random_state(random_state)

    def collect(self, run, i, h, p_h, info):
        """
        Record state h reached at iteration i into run.
        Iterations are numbered from 1; iteration 0 is the initial state.
        """
        run.record_state(h.theta)
        if i >= self.burn_in:
            if (i % self.thinning_period) == 0:
                run.add_sample(h.theta, p_h, i, info)
            run.add_best_sample(h.theta, p_h, i, info)

    def report(self, i, h, p_h):
        if self.verbose and (i % self.report_period) == 0:
            print("Iteration {0:d}, current theta {1:f}".format(i, h.theta))
            print("Posterior: {0:e}".format(p_h))

    def sample(self):
        """
        Run the chain.
        :return An instance of MCMCRun class
        """
        raise NotImplementedError()
