"""
cauchy_mcmc

This file contains the abstract Hypothesis class.

Created on Oct 17, 2026
"""


class Hypothesis(object):
    """
    Hypothesis class is an abstract class that specifies the template
    for an MCMC hypothesis, i.e., one state of the chain.
    """

    def __init__(self):
        """
        Hypothesis class constructor
        """
        # un-normalized posterior value. we want to cache it, therefore we initialize it to None.
        # posterior method calculates it once.
        self._p = None

    def _calculate_posterior(self, data=None):
        """
        This method calculates the un-normalized posterior of the hypothesis.
        This method needs to be overridden in children classes.
        """
        raise NotImplementedError()

    def posterior(self, data=None):
        """
        Returns the un-normalized posterior p(H|D) of the hypothesis
        """
        if self._p is None:
            self._p = self._calculate_posterior(data)
        return self._p

    def copy(self):
        """
        Returns a copy of the hypothesis with an empty cache. Used for generating
        new hypotheses based on itself.
        """
        raise NotImplementedError()
