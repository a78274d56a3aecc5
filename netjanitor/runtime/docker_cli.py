"""Runtime adapter that shells out to the docker command line client."""

import logging
import os
from subprocess import CalledProcessError, check_call, check_output
from typing import List

from ..errors import RuntimeCommandError
from ..utils import autoDecode
from .interface import NetworkRuntime

LOG = logging.getLogger(__name__)

DEFAULT_DOCKER_BIN = "/usr/bin/docker"


class DockerCliRuntime(NetworkRuntime):
    def __init__(self, dockerBin: str = DEFAULT_DOCKER_BIN):
        self.dockerBin = dockerBin

    @classmethod
    def fromConfig(cls, config):
        return cls(config.dockerBin)

    def listCmd(self) -> List[str]:
        return [self.dockerBin, "network", "ls", "--format", "{{ .Name }}", "-q"]

    def removeCmd(self, name: str) -> List[str]:
        return [self.dockerBin, "network", "rm", name]

    def listNetworks(self) -> List[str]:
        cmd = self.listCmd()
        LOG.debug("running %r", cmd)
        try:
            out = check_output(cmd, env=os.environ.copy())
        except (OSError, CalledProcessError) as err:
            raise RuntimeCommandError(cmd, err) from err
        return autoDecode(out).split("\n")

    def removeNetwork(self, name: str) -> None:
        cmd = self.removeCmd(name)
        LOG.debug("running %r", cmd)
        try:
            check_call(cmd, env=os.environ.copy())
        except (OSError, CalledProcessError) as err:
            raise RuntimeCommandError(cmd, err) from err
