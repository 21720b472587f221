"""
cauchy_mcmc

This file contains the exceptions raised by samplers.

Created on Oct 17, 2026
"""


class ConfigurationError(ValueError):
    """
    Invalid sampler configuration. Raised at construction, before any sampling happens.
    """
    pass


class DegenerateLevelError(ArithmeticError):
    """
    Raised when the auxiliary level of a slice step is exactly 0. The enclosing interval is infinite in that case, so
    the caller has to draw a new level.
    """
    pass


class RetryExhaustedError(RuntimeError):
    """
    Raised when a retry loop (candidate draws of the rejection sampler, or level draws of the slice sampler) exceeds
    its cap.
    """
    pass
