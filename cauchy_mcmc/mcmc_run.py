"""
cauchy_mcmc

This file contains the MCMCRun and related classes. These classes store the results of an MCMC run.

Created on Oct 17, 2026
"""

import pickle
import time

import numpy as np
import pandas as pd

BEST_SAMPLES_LIST_SIZE = 20


class MCMCRun(object):
    """
    MCMCRun class holds information, e.g., the chain, acceptance rate,
     samples, and best samples, related to a run of a MCMC chain.
    """

    def __init__(self, info, chain_length, log_row_count, log_columns, best_sample_count=BEST_SAMPLES_LIST_SIZE,
                 burn_in=0):
        self.info = info
        self.start_time = time.strftime("%Y.%m.%d %H:%M:%S")
        self.end_time = ""
        self.burn_in = burn_in
        self.samples = SampleSet()
        self.best_samples = BestSampleSet(best_sample_count)
        # the chain is allocated once; each iteration writes exactly one entry
        self.chain_length = chain_length
        self.chain = np.empty(chain_length, dtype=np.float64)
        self.last_chain_index = 0
        self.log_row_count = log_row_count
        self.log_columns = log_columns
        self._log_rows = []
        self._run_log = None

    def record_state(self, theta):
        """Append the next state of the chain

        Args:
            theta (float): chain state
        """
        if self.last_chain_index >= self.chain_length:
            raise IndexError("Chain full. Cannot add new state.")

        self.chain[self.last_chain_index] = theta
        self.last_chain_index += 1

    def record_log(self, row):
        """Record one row into log

        Args:
            row (dict): A dictionary of information to record
        """
        if len(self._log_rows) >= self.log_row_count:
            raise IndexError("Log full. Cannot add new row.")

        self._log_rows.append(row)
        self._run_log = None

    @property
    def run_log(self):
        """pandas DataFrame with one row per recorded iteration"""
        if self._run_log is None:
            self._run_log = pd.DataFrame(self._log_rows, columns=self.log_columns)
        return self._run_log

    def add_sample(self, s, p, iter_no, info):
        self.samples.add(s, p, iter_no, info)

    def add_best_sample(self, s, p, iter_no, info):
        self.best_samples.add(s, p, iter_no, info)

    def finish(self):
        if self.last_chain_index != self.chain_length:
            raise RuntimeError("Chain incomplete: {0:d} of {1:d} states recorded.".format(self.last_chain_index,
                                                                                         self.chain_length))
        self.chain.setflags(write=False)
        self.end_time = time.strftime("%Y.%m.%d %H:%M:%S")

    def acceptance_rate_by_move(self):
        df = self.run_log
        t = df.groupby('MoveType', as_index=False)['IsAccepted'].mean()
        return t.rename(columns={'IsAccepted': 'AcceptanceRate'})

    def estimate_probability(self, event):
        """Estimate the posterior probability of an event from the chain.

        Args:
            event (callable): vectorized predicate; takes an array of theta values and returns a boolean array.

        Returns:
            float: fraction of chain states after burn-in satisfying the event
        """
        x = self.chain[self.burn_in:self.last_chain_index]
        if x.size == 0:
            raise ValueError("No states recorded after burn-in.")
        return float(np.mean(event(x)))

    def save(self, filename):
        with open(filename, 'wb') as f:
            pickle.dump(obj=self, file=f)

    @staticmethod
    def load(filename):
        with open(filename, 'rb') as f:
            return pickle.load(f)


class SampleSet:
    """
    SampleSet class implements a simple list of samples.
    Each sample consists of the state, its posterior
    value and some info associated with it.
    """

    def __init__(self):
        self.samples = []
        self.probs = []
        self.infos = []
        self.iters = []

    def add(self, s, p, iter_no, info):
        self.samples.append(s)
        self.probs.append(p)
        self.infos.append(info)
        self.iters.append(iter_no)

    def pop(self, i):
        if i < len(self.samples):
            s = self.samples.pop(i)
            p = self.probs.pop(i)
            iter_no = self.iters.pop(i)
            info = self.infos.pop(i)
            return s, p, iter_no, info
        return None

    def __len__(self):
        return len(self.samples)

    def __getitem__(self, item):
        if item < len(self.samples):
            s = self.samples[item]
            p = self.probs[item]
            iter_no = self.iters[item]
            info = self.infos[item]
            return s, p, iter_no, info
        raise KeyError("Index exceeds number of samples in sample set.")


class BestSampleSet(SampleSet):
    """
    BestSampleSet class implements a list of samples intended to
    keep the best samples (in terms of posterior value) so far in a
    chain. We add a sample to the set if it has higher posterior
    than at least one of the samples in the set.
    """

    def __init__(self, capacity):
        SampleSet.__init__(self)
        self.capacity = capacity

    def add(self, s, p, iter_no, info):
        if self.capacity == 0:
            return
        if len(self.samples) < self.capacity:
            if s not in self.samples:
                SampleSet.add(self, s, p, iter_no, info)
        elif p > np.min(self.probs):
            if s not in self.samples:
                min_i = int(np.argmin(self.probs))
                self.pop(min_i)
                SampleSet.add(self, s, p, iter_no, info)
