"""
cauchy_mcmc

This file contains the rejection sampler used for the horizontal step of the slice sampler.

We want to draw theta uniformly from the super-level set G_s = {theta : p(theta) >= s}. Its boundary has no closed
form, so we draw uniformly from an interval H_s that contains G_s and reject candidates outside G_s.

Deriving H_s: for theta < y_min every factor satisfies 1 / (1 + (y_i - theta)^2) <= 1 / (1 + (y_min - theta)^2),
therefore p(theta) <= (1 / (1 + (y_min - theta)^2))^n. Setting the right hand side to s gives
y_min - theta = sqrt(s^(-1/n) - 1). The same argument holds above y_max. Hence

    H_s = (y_min - a, y_max + a),    a = sqrt(s^(-1/n) - 1)

Note that H_s is a superset of G_s but not the tightest one; the bound uses a single extreme observation raised to
the power n.

Created on Oct 17, 2026
"""

import numpy as np

from cauchy_mcmc.exceptions import ConfigurationError, DegenerateLevelError, RetryExhaustedError
from cauchy_mcmc.posterior import cauchy_posterior, check_observations

DEFAULT_MAX_RETRIES = 100000


def enclosing_interval(level, observations):
    """Calculate the interval H_s enclosing the super-level set of the posterior at `level`.

    Args:
        level (float): density threshold s. Must be positive.
        observations (numpy.ndarray): 1D array of observations

    Returns:
        tuple: (low, high)

    Raises:
        DegenerateLevelError: if level is exactly 0, or so small that the interval is not finite in float64.
        ValueError: if level is negative or NaN.
    """
    if np.isnan(level) or level < 0.0:
        raise ValueError("Level has to be non-negative. Got {0}".format(level))
    if level == 0.0:
        raise DegenerateLevelError("Level is 0, enclosing interval is infinite. Draw a new level.")

    n = observations.size
    # s^(-1/n) in log space; subnormal levels overflow it to inf
    with np.errstate(over='ignore'):
        t = np.exp(-np.log(level) / n)
    half_width = np.sqrt(t - 1.0) if t > 1.0 else 0.0
    low, high = np.min(observations) - half_width, np.max(observations) + half_width
    if not np.isfinite(high - low):
        raise DegenerateLevelError("Enclosing interval at level {0:e} is not finite. Draw a new level.".format(level))
    return low, high


class RejectionIntervalSampler(object):
    """
    Draws uniformly from the super-level set of the posterior by rejection sampling from the enclosing interval.
    """

    def __init__(self, observations, max_retries=DEFAULT_MAX_RETRIES):
        """
        observations: observed data
        max_retries: maximum number of candidates drawn for one level before giving up
        """
        if max_retries < 1:
            raise ConfigurationError("max_retries has to be at least 1.")
        self.observations = check_observations(observations)
        self.max_retries = int(max_retries)

    def sample(self, level, rng):
        """Draw theta uniformly from {theta : p(theta) >= level}.

        Args:
            level (float): density threshold, in (0, max posterior]
            rng (numpy.random.Generator): random number generator

        Returns:
            tuple: (theta, posterior value of theta, number of candidates drawn, (low, high))

        Raises:
            DegenerateLevelError: level is exactly 0. The caller should draw a new level.
            RetryExhaustedError: no candidate accepted after max_retries draws.
        """
        low, high = enclosing_interval(level, self.observations)
        for i in range(self.max_retries):
            theta = rng.uniform(low, high)
            p = cauchy_posterior(theta, self.observations)
            if p >= level:
                return theta, p, i + 1, (low, high)

        raise RetryExhaustedError("No candidate accepted after {0:d} draws from ({1:e}, {2:e}) "
                                  "at level {3:e}.".format(self.max_retries, low, high, level))
