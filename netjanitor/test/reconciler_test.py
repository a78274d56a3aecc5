import os
import shutil
import tempfile
import threading
import unittest
from unittest import mock

from netjanitor import reconciler
from netjanitor.reconciler import Ticker, runCycle, runForever
from netjanitor.runtime import InMemoryRuntime
from netjanitor.test.helpers import (
    NET1,
    NET2,
    UUID1,
    UUID2,
    writeJobFile,
    writeRunningJob,
)

DEADBEEF = "deadbeefdeadbeefdeadbeefdeadbeef_default"


class TestRunCycle(unittest.TestCase):
    def setUp(self):
        self.tmpDir = tempfile.mkdtemp()
        self.jobDir = os.path.join(self.tmpDir, "jobs")
        os.mkdir(self.jobDir)

    def tearDown(self):
        shutil.rmtree(self.tmpDir)

    def test_no_job_files(self):
        runtime = InMemoryRuntime([DEADBEEF, "otherservice", ""])
        report = runCycle(runtime, self.jobDir)
        self.assertEqual([DEADBEEF], report.removed)
        self.assertEqual([], report.failed)
        self.assertEqual(["otherservice", ""], runtime.networks)
        self.assertFalse(report.table["otherservice"])
        self.assertIsNotNone(report.finished)
        self.assertLessEqual(report.started, report.finished)

    def test_running_job_is_kept(self):
        workDir = os.path.join(self.tmpDir, "work")
        writeRunningJob(workDir, UUID1)
        writeJobFile(self.jobDir, UUID1, workDir)
        runtime = InMemoryRuntime([NET1])
        report = runCycle(runtime, self.jobDir)
        self.assertEqual({NET1: False}, report.table)
        self.assertEqual([], runtime.removed)
        self.assertEqual([NET1], runtime.networks)

    def test_finished_job_is_removed(self):
        writeJobFile(self.jobDir, UUID1, os.path.join(self.tmpDir, "gone"))
        runtime = InMemoryRuntime([NET1])
        report = runCycle(runtime, self.jobDir)
        self.assertEqual([NET1], report.removed)
        self.assertEqual([], runtime.networks)

    def test_removal_failure_does_not_stop_cycle(self):
        runtime = InMemoryRuntime([NET1, NET2, DEADBEEF])
        runtime.failRemove.add(NET2)
        report = runCycle(runtime, self.jobDir)
        self.assertEqual([NET2], report.failed)
        self.assertEqual([NET1, DEADBEEF], report.removed)
        self.assertEqual([NET2], runtime.networks)

        runtime.failRemove.clear()
        report = runCycle(runtime, self.jobDir)
        self.assertEqual([NET2], report.removed)

    def test_inventory_failure_is_empty_inventory(self):
        runtime = InMemoryRuntime([DEADBEEF])
        runtime.failList = True
        report = runCycle(runtime, self.jobDir)
        self.assertEqual([], report.inventory)
        self.assertEqual({}, report.table)
        self.assertEqual([DEADBEEF], runtime.networks)

    def test_inventory_failure_still_reclaims_finished_jobs(self):
        writeJobFile(self.jobDir, UUID1, os.path.join(self.tmpDir, "gone"))
        runtime = InMemoryRuntime([NET1, DEADBEEF])
        runtime.failList = True
        report = runCycle(runtime, self.jobDir)
        self.assertEqual([NET1], report.removed)
        self.assertEqual([DEADBEEF], runtime.networks)

    def test_unreadable_job_dir(self):
        runtime = InMemoryRuntime([DEADBEEF])
        report = runCycle(runtime, os.path.join(self.tmpDir, "missing"))
        self.assertEqual([], report.jobFiles)
        self.assertEqual([DEADBEEF], report.removed)

    def test_removal_of_network_not_in_inventory_is_logged(self):
        writeJobFile(self.jobDir, UUID2, os.path.join(self.tmpDir, "gone"))
        runtime = InMemoryRuntime([])
        report = runCycle(runtime, self.jobDir)
        self.assertEqual([NET2], report.failed)
        self.assertEqual([], report.removed)

    def test_idempotent(self):
        workDir = os.path.join(self.tmpDir, "work")
        writeRunningJob(workDir, UUID1)
        writeJobFile(self.jobDir, UUID1, workDir)
        writeJobFile(self.jobDir, UUID2, os.path.join(self.tmpDir, "gone"))
        inventory = [NET1, NET2, DEADBEEF, "bridge"]
        first = runCycle(InMemoryRuntime(inventory), self.jobDir)
        second = runCycle(InMemoryRuntime(inventory), self.jobDir)
        self.assertEqual(first.table, second.table)
        self.assertEqual(first.removed, second.removed)

    def test_summary(self):
        report = runCycle(InMemoryRuntime([DEADBEEF]), self.jobDir)
        self.assertEqual("1 networks, 0 job files, removed 1, failed 0",
                         report.summary())


class TestTicker(unittest.TestCase):
    def test_wait_returns_true_until_cancelled(self):
        ticker = Ticker(0.001)
        self.assertTrue(ticker.wait())
        self.assertFalse(ticker.cancelled)
        ticker.cancel()
        self.assertTrue(ticker.cancelled)
        self.assertFalse(ticker.wait())

    def test_cancel_from_other_thread_wakes_wait(self):
        ticker = Ticker(60)
        timer = threading.Timer(0.01, ticker.cancel)
        timer.start()
        try:
            self.assertFalse(ticker.wait())
        finally:
            timer.cancel()

    def test_signal_handler_cancels(self):
        ticker = Ticker(60)
        with mock.patch.object(reconciler.signal, "signal") as signalMock:
            reconciler.installSignalHandlers(ticker)
        self.assertEqual(2, signalMock.call_count)
        handler = signalMock.call_args[0][1]
        handler(15, None)
        self.assertTrue(ticker.cancelled)


class TestRunForever(unittest.TestCase):
    def test_runs_until_cancelled(self):
        ticker = Ticker(0)
        calls = []

        def fakeCycle(runtime, jobDir):
            calls.append((runtime, jobDir))
            if len(calls) == 3:
                ticker.cancel()

        with mock.patch.object(reconciler, "runCycle", side_effect=fakeCycle):
            cycles = runForever("runtime", "/jobs", ticker)
        self.assertEqual(3, cycles)
        self.assertEqual([("runtime", "/jobs")] * 3, calls)

    def test_cancelled_before_start(self):
        ticker = Ticker(0)
        ticker.cancel()
        with mock.patch.object(reconciler, "runCycle") as cycleMock:
            self.assertEqual(0, runForever("runtime", "/jobs", ticker))
        cycleMock.assert_not_called()
