"""
cauchy_mcmc

This file contains helpers for creating the random number generators passed into samplers.

Created on Oct 17, 2026
"""

import numpy as np


def get_random_state(random_state=None):
    """Return a numpy Generator.

    Args:
        random_state: None (fresh entropy), an int seed, a SeedSequence or a Generator. Generators are returned as
            they are so that the caller can share one stream on purpose.

    Returns:
        numpy.random.Generator
    """
    if isinstance(random_state, np.random.Generator):
        return random_state
    return np.random.default_rng(random_state)


def spawn_random_states(seed, count):
    """Return `count` statistically independent generators derived from a single seed.

    Use one generator per chain when running independent chains.
    """
    if count < 1:
        raise ValueError("count has to be positive.")
    children = np.random.SeedSequence(seed).spawn(count)
    return [np.random.default_rng(c) for c in children]
