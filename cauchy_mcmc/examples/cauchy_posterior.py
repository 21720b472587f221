"""
Comparing Metropolis-Hastings and slice sampling on the bimodal posterior with a product of Cauchy kernels likelihood.

The four observations form two pairs far apart, so the posterior has two separated modes. A random walk MH chain
with unit step size rarely crosses between them, while the slice sampler jumps whenever the level falls below the
height of the other mode.

Run with
    python -m cauchy_mcmc.examples.cauchy_posterior

17 Oct. 2026
"""

import numpy as np
import scipy.integrate

from cauchy_mcmc.mh_sampler import MHSampler
from cauchy_mcmc.posterior import CauchyHypothesis, cauchy_posterior
from cauchy_mcmc.proposal import GaussianRandomWalkProposal
from cauchy_mcmc.random_state import spawn_random_states
from cauchy_mcmc.slice_sampler import SliceSampler

REFERENCE_OBSERVATIONS = [-16.6, -14.7, 6.3, 8.4]
REFERENCE_ITERATION_COUNT = 5000
REFERENCE_INITIAL_THETAS = (-20.0, 0.0)
REFERENCE_PROPOSAL_SD = 1.0


def exact_probability(observations, low=-np.inf, high=np.inf):
    """
    Calculate P(low < theta < high) under the normalized posterior by numerical integration.
    """
    y = np.asarray(observations, dtype=np.float64)
    # posterior values are tiny; integrate the posterior scaled by its value at the observations' maximum
    scale = max(cauchy_posterior(v, y) for v in y)

    def f(t):
        return cauchy_posterior(t, y) / scale

    # split at the observations so quad sees the modes
    edges = [-np.inf] + sorted(set(y)) + [np.inf]
    total = 0.0
    part = 0.0
    for a, b in zip(edges[:-1], edges[1:]):
        total += scipy.integrate.quad(f, a, b, epsabs=0.0, limit=200)[0]
        lo, hi = max(a, low), min(b, high)
        if lo < hi:
            part += scipy.integrate.quad(f, lo, hi, epsabs=0.0, limit=200)[0]
    return part / total


def run_samplers(observations=REFERENCE_OBSERVATIONS, iteration_count=REFERENCE_ITERATION_COUNT,
                 initial_thetas=REFERENCE_INITIAL_THETAS, proposal_sd=REFERENCE_PROPOSAL_SD, seed=None):
    """
    Run one MH chain and one slice chain from each initial theta, each with its own random stream.
    Returns a dictionary {(sampler name, initial theta): MCMCRun}
    """
    rngs = spawn_random_states(seed, 2 * len(initial_thetas))
    runs = {}
    for k, theta0 in enumerate(initial_thetas):
        proposal = GaussianRandomWalkProposal({'PROPOSAL_SD': proposal_sd})
        mh = MHSampler(initial_h=CauchyHypothesis(theta0), data=observations, iteration_count=iteration_count,
                       proposal=proposal, random_state=rngs[2 * k])
        runs[('MH', theta0)] = mh.sample()
        ss = SliceSampler(initial_h=CauchyHypothesis(theta0), data=observations, iteration_count=iteration_count,
                          random_state=rngs[2 * k + 1])
        runs[('Slice', theta0)] = ss.sample()
    return runs


if __name__ == '__main__':
    runs = run_samplers(seed=1)

    p_above = exact_probability(REFERENCE_OBSERVATIONS, low=8.0)
    p_below = exact_probability(REFERENCE_OBSERVATIONS, high=-15.0)
    print("Exact: P(theta > 8) = {0:.3f}, P(theta < -15) = {1:.3f}".format(p_above, p_below))
    for (name, theta0), run in sorted(runs.items()):
        print("{0:s} from {1:.1f}: P(theta > 8) = {2:.3f}, P(theta < -15) = {3:.3f}".format(
            name, theta0, run.estimate_probability(lambda x: x > 8.0),
            run.estimate_probability(lambda x: x < -15.0)))

    # plot results
    import matplotlib.pyplot as plt

    x = np.linspace(-30.0, 20.0, 1000)
    p = np.array([cauchy_posterior(t, np.asarray(REFERENCE_OBSERVATIONS)) for t in x])

    fig, axes = plt.subplots(len(runs), 2, figsize=(12, 3 * len(runs)))
    for row, ((name, theta0), run) in enumerate(sorted(runs.items())):
        axes[row, 0].plot(run.chain, linewidth=0.5)
        axes[row, 0].set_title("{0:s} trace, theta0 = {1:.1f}".format(name, theta0))
        axes[row, 1].hist(run.chain, bins=100, density=True)
        axes[row, 1].plot(x, p / np.trapezoid(p, x))
        axes[row, 1].set_title("{0:s} samples, theta0 = {1:.1f}".format(name, theta0))
    fig.tight_layout()
    plt.show()
