"""
cauchy_mcmc

This file contains the un-normalized posterior with a product of Cauchy kernels likelihood and the
hypothesis class for a scalar parameter theta.

    p(theta | y) is proportional to prod_i 1 / (1 + (y_i - theta)^2)

Each factor lies in (0, 1], so the posterior is bounded by 1. It has one local mode near each cluster of observations.

Created on Oct 17, 2026
"""

import numpy as np

from cauchy_mcmc.exceptions import ConfigurationError
from cauchy_mcmc.hypothesis import Hypothesis


def cauchy_posterior(theta, observations):
    """
    Calculate the un-normalized posterior value of theta.

    theta: scalar parameter
    observations: 1D array of observed values
    Returns a numpy float in [0, 1]. The value is strictly positive in exact arithmetic; it underflows to 0 only when
    theta is astronomically far from every observation.
    """
    # squares overflow to inf for huge |theta|, which gives factors of exactly 0.
    with np.errstate(over='ignore', under='ignore'):
        return np.prod(1.0 / (1.0 + np.square(observations - theta)))


def check_observations(observations):
    """
    Validate observations and return them as a read-only float64 numpy array.
    Raises ConfigurationError if observations are empty, not one dimensional or not finite.
    """
    try:
        y = np.array(observations, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ConfigurationError("Observations must be real numbers: {0}".format(e))
    if y.ndim != 1:
        raise ConfigurationError("Observations must be a one dimensional sequence.")
    if y.size == 0:
        raise ConfigurationError("At least one observation is required.")
    if not np.all(np.isfinite(y)):
        raise ConfigurationError("Observations must be finite.")
    y.setflags(write=False)
    return y


class CauchyHypothesis(Hypothesis):
    """
    A single real parameter theta under the product of Cauchy kernels posterior.
    """

    def __init__(self, theta=0.0):
        Hypothesis.__init__(self)
        self.theta = float(theta)

    def _calculate_posterior(self, data=None):
        return cauchy_posterior(self.theta, data)

    def copy(self):
        h_copy = CauchyHypothesis(theta=self.theta)
        return h_copy

    def __eq__(self, other):
        return isinstance(other, CauchyHypothesis) and self.theta == other.theta

    def __hash__(self):
        return hash(self.theta)

    def __str__(self):
        return str(self.theta)

    def __repr__(self):
        return "CauchyHypothesis({0!r})".format(self.theta)
