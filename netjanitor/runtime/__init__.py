"""
Container runtime adapters.

``NetworkRuntime`` is the interface the reconciler depends on; the docker
adapter talks to a real runtime, the in-memory one stands in for it.
"""

from .docker_cli import DEFAULT_DOCKER_BIN, DockerCliRuntime
from .interface import NetworkRuntime
from .memory import InMemoryRuntime

__all__ = [
    "DEFAULT_DOCKER_BIN",
    "DockerCliRuntime",
    "InMemoryRuntime",
    "NetworkRuntime",
]
