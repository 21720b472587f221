"""
cauchy_mcmc

Unit tests for MCMCRun and related classes.

Created on Oct 17, 2026
"""

import os
import shutil
import tempfile
import unittest

from cauchy_mcmc.mcmc_run import *


class MCMCRunTest(unittest.TestCase):
    def setUp(self):
        self.r = MCMCRun(info='test', chain_length=3, log_row_count=2, best_sample_count=2,
                         log_columns=['Iteration', 'IsAccepted', 'Posterior', 'AcceptanceRatio', 'MoveType'])

    def tearDown(self):
        self.r = None

    def test_record_iteration(self):
        r1 = {'Iteration': 0, 'IsAccepted': 1, 'Posterior': 1.0, 'AcceptanceRatio': 1.0, 'MoveType': 'move1'}
        r2 = {'Iteration': 1, 'IsAccepted': 0, 'Posterior': 1.0, 'AcceptanceRatio': 1.0, 'MoveType': 'move2'}
        self.r.record_log(r1)
        self.r.record_log(r2)
        self.assertTrue(dict(self.r.run_log.loc[0]) == r1)
        self.assertTrue(dict(self.r.run_log.loc[1]) == r2)
        self.assertRaises(IndexError, self.r.record_log, {'Iteration': 2, 'IsAccepted': 1, 'Posterior': 1,
                                                          'AcceptanceRatio': 1, 'MoveType': 'test'})

    def test_record_state(self):
        self.r.record_state(1.0)
        self.r.record_state(2.0)
        # chain is not full yet
        self.assertRaises(RuntimeError, self.r.finish)
        self.r.record_state(3.0)
        self.assertRaises(IndexError, self.r.record_state, 4.0)
        self.r.finish()
        self.assertListEqual(list(self.r.chain), [1.0, 2.0, 3.0])
        self.assertNotEqual(self.r.end_time, "")
        # chain cannot be modified after the run is finished
        self.assertRaises(ValueError, self.r.chain.__setitem__, 0, 5.0)

    def test_add_sample(self):
        self.r.add_sample(1.5, 1.0, 1, 'move1')
        self.r.add_sample(2.5, 1.0, 5, 'move2')
        self.assertListEqual(list(self.r.samples[0]), [1.5, 1.0, 1, 'move1'])
        self.assertListEqual(list(self.r.samples[1]), [2.5, 1.0, 5, 'move2'])
        self.assertEqual(len(self.r.samples), 2)
        self.assertRaises(KeyError, self.r.samples.__getitem__, 2)

    def test_add_best_sample(self):
        self.r.add_best_sample(1.5, 1.0, 1, 'move1')
        self.r.add_best_sample(2.5, 2.0, 5, 'move2')
        self.assertListEqual(list(self.r.best_samples[0]), [1.5, 1.0, 1, 'move1'])
        self.assertListEqual(list(self.r.best_samples[1]), [2.5, 2.0, 5, 'move2'])
        # this sample should not be added
        self.r.add_best_sample(3.5, 0.0, 15, 'move2')
        self.assertNotIn(3.5, self.r.best_samples.samples)
        # this one should be added
        self.r.add_best_sample(4.5, 4.0, 33, 'move1')
        self.assertIn(4.5, self.r.best_samples.samples)
        self.assertIn(2.5, self.r.best_samples.samples)
        # duplicates are not added
        self.r.add_best_sample(4.5, 4.0, 34, 'move1')
        self.assertEqual(len(self.r.best_samples), 2)

    def test_acceptance_rate_by_move(self):
        self.r.record_log({'Iteration': 0, 'IsAccepted': 1, 'Posterior': 1.0, 'AcceptanceRatio': 1.0,
                           'MoveType': 'move1'})
        self.r.record_log({'Iteration': 1, 'IsAccepted': 0, 'Posterior': 1.0, 'AcceptanceRatio': 1.0,
                           'MoveType': 'move2'})
        t = self.r.acceptance_rate_by_move()
        self.assertTrue(np.all(t[t.MoveType == 'move1'].AcceptanceRate == 1.0))
        self.assertTrue(np.all(t[t.MoveType == 'move2'].AcceptanceRate == 0.0))

    def test_estimate_probability(self):
        r = MCMCRun(info='test', chain_length=5, log_row_count=4, log_columns=['Iteration'], burn_in=1)
        for theta in [100.0, 1.0, -1.0, 2.0, 3.0]:
            r.record_state(theta)
        r.finish()
        # first state is burn-in
        self.assertAlmostEqual(r.estimate_probability(lambda x: x > 0.0), 0.75)
        self.assertAlmostEqual(r.estimate_probability(lambda x: x > 50.0), 0.0)

    def test_save_load(self):
        folder = tempfile.mkdtemp()
        try:
            self.r.record_state(1.0)
            self.r.record_state(2.0)
            self.r.record_state(3.0)
            self.r.record_log({'Iteration': 0, 'IsAccepted': 1, 'Posterior': 1.0, 'AcceptanceRatio': 1.0,
                               'MoveType': 'move1'})
            self.r.finish()
            filename = os.path.join(folder, 'run.pkl')
            self.r.save(filename)
            r = MCMCRun.load(filename)
            self.assertEqual(r.info, 'test')
            self.assertListEqual(list(r.chain), [1.0, 2.0, 3.0])
            self.assertEqual(len(r.run_log), 1)
        finally:
            shutil.rmtree(folder)
