"""
In-process runtime.

Holds a set of network names in memory. Used by the test-suite and by
``--runtime memory`` to exercise a cycle without a container runtime.
"""

import logging
from typing import Iterable, List, Optional, Set

from ..errors import RuntimeCommandError
from .interface import NetworkRuntime

LOG = logging.getLogger(__name__)


class InMemoryRuntime(NetworkRuntime):
    def __init__(self, networks: Optional[Iterable[str]] = None):
        self.networks: List[str] = list(networks or [])
        self.removed: List[str] = []
        self.failList = False
        self.failRemove: Set[str] = set()

    def listNetworks(self) -> List[str]:
        if self.failList:
            raise RuntimeCommandError(["network", "ls"], "listing disabled")
        return list(self.networks)

    def removeNetwork(self, name: str) -> None:
        cmd = ["network", "rm", name]
        if name in self.failRemove:
            raise RuntimeCommandError(cmd, "removal disabled")
        if name not in self.networks:
            raise RuntimeCommandError(cmd, "no such network")
        LOG.debug("removing in-memory network %s", name)
        self.networks.remove(name)
        self.removed.append(name)
