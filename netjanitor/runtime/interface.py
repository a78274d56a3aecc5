"""
Capability interface for the container runtime.

The janitor only needs two things from a runtime: the names of all of its
networks, and a way to remove one of them by name.
"""

from abc import ABC, abstractmethod
from typing import List


class NetworkRuntime(ABC):
    """Abstract network-management surface of a container runtime."""

    @abstractmethod
    def listNetworks(self) -> List[str]:
        """
        List every network the runtime currently knows about.

        Names are returned as reported, without filtering; a trailing empty
        entry is possible.

        Raises:
            RuntimeCommandError: if the runtime could not be queried
        """

    @abstractmethod
    def removeNetwork(self, name: str) -> None:
        """
        Remove a network by name.

        Args:
            name: The network name

        Raises:
            RuntimeCommandError: if the runtime refused or failed
        """

    @classmethod
    def fromConfig(cls, config):
        # pylint: disable=unused-argument
        return cls()
