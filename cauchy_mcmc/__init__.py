"""
cauchy_mcmc

Metropolis-Hastings and slice sampling for the one dimensional posterior with a product of Cauchy kernels
likelihood.
"""

from cauchy_mcmc.exceptions import ConfigurationError, DegenerateLevelError, RetryExhaustedError
from cauchy_mcmc.mcmc_run import MCMCRun
from cauchy_mcmc.mh_sampler import MHSampler
from cauchy_mcmc.posterior import CauchyHypothesis, cauchy_posterior
from cauchy_mcmc.proposal import GaussianRandomWalkProposal
from cauchy_mcmc.rejection import RejectionIntervalSampler, enclosing_interval
from cauchy_mcmc.slice_sampler import SliceSampler

__version__ = '0.1.0'
