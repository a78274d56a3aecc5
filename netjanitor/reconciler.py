"""
One reconciliation cycle, and the loop that repeats it.

A cycle fetches the runtime's network inventory, scans the job directory,
classifies every network and removes the ones found removable. Nothing
survives from one cycle to the next.
"""

from dataclasses import dataclass, field
from datetime import datetime
import logging
import signal
import threading
from typing import List, Optional

from .classifier import RemovabilityTable, classify, removableNetworks
from .errors import RuntimeCommandError
from .jobfiles import jobFiles
from .runtime import NetworkRuntime
from .utils import utcNow

LOG = logging.getLogger(__name__)


@dataclass
class CycleReport:
    started: datetime
    finished: Optional[datetime] = None
    inventory: List[str] = field(default_factory=list)
    jobFiles: List[str] = field(default_factory=list)
    table: RemovabilityTable = field(default_factory=dict)
    removed: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    def summary(self):
        return ("{} networks, {} job files, removed {}, failed {}".format(
            len(self.inventory), len(self.jobFiles),
            len(self.removed), len(self.failed)))


def fetchInventory(runtime: NetworkRuntime) -> List[str]:
    try:
        return runtime.listNetworks()
    except RuntimeCommandError as err:
        LOG.error("failed to list networks: %s", err)
        return []


def scanJobFiles(jobDir: str) -> List[str]:
    try:
        return jobFiles(jobDir)
    except OSError as err:
        LOG.error("failed to get job files from %s: %s", jobDir, err)
        return []


def removeNetworks(runtime: NetworkRuntime, table: RemovabilityTable,
                   report: CycleReport) -> None:
    for name in removableNetworks(table):
        LOG.info("removing docker network %s", name)
        try:
            runtime.removeNetwork(name)
        except RuntimeCommandError as err:
            LOG.error("failed to remove network %s: %s", name, err)
            report.failed.append(name)
        else:
            report.removed.append(name)


def runCycle(runtime: NetworkRuntime, jobDir: str) -> CycleReport:
    report = CycleReport(started=utcNow())
    report.inventory = fetchInventory(runtime)
    report.jobFiles = scanJobFiles(jobDir)
    report.table = classify(report.inventory, report.jobFiles)
    removeNetworks(runtime, report.table, report)
    report.finished = utcNow()
    LOG.info("cycle done: %s", report.summary())
    return report


class Ticker(object):
    """
    Cancellable interval timer.

    ``wait()`` blocks for one interval and returns False once the ticker has
    been cancelled, so it can drive a ``while`` loop directly.
    """

    def __init__(self, interval: float):
        self.interval = interval
        self._cancelled = threading.Event()

    def cancel(self):
        self._cancelled.set()

    @property
    def cancelled(self):
        return self._cancelled.is_set()

    def wait(self) -> bool:
        return not self._cancelled.wait(self.interval)


def installSignalHandlers(ticker: Ticker):
    def _handler(signum, _frame):
        LOG.info("received signal %d, exiting after this cycle", signum)
        ticker.cancel()

    for signum in (signal.SIGINT, signal.SIGTERM):
        signal.signal(signum, _handler)


def runForever(runtime: NetworkRuntime, jobDir: str, ticker: Ticker) -> int:
    cycles = 0
    while not ticker.cancelled:
        runCycle(runtime, jobDir)
        cycles += 1
        if not ticker.wait():
            break
    LOG.info("stopped after %d cycles", cycles)
    return cycles
