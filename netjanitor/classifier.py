"""
Liveness classification of janitor networks.

A removability table maps every network name to whether it may be removed
in the current cycle. It is built from scratch from an inventory snapshot
and the job files on disk, and is never carried across cycles.
"""

import logging
import os
from typing import Dict, Iterable

from .domain import (
    CleanableJob,
    RunningJob,
    is_janitor_network,
    to_job_uuid,
    to_network_name,
)
from .errors import JobFileError, JobFileOpenError

LOG = logging.getLogger(__name__)

RemovabilityTable = Dict[str, bool]


def seedRemovable(inventory: Iterable[str]) -> RemovabilityTable:
    """
    Every network matching the janitor naming convention starts out
    removable. Anything else is recorded as not removable.
    """
    table = {}
    for name in inventory:
        if is_janitor_network(name):
            LOG.info("adding %s to the list of removable networks", name)
            table[name] = True
        else:
            table[name] = False
    return table


def classifyJobFile(table: RemovabilityTable, jobFile: str) -> None:
    netName = to_network_name(to_job_uuid(jobFile))

    try:
        localJob = CleanableJob.from_file(jobFile)
    except JobFileError as err:
        # Leaves the seeded value alone.
        LOG.warning("failed to parse job file %s: %s", jobFile, err)
        return

    workDir = localJob.local_working_directory
    if not os.path.exists(workDir):
        LOG.info("directory %s does not exist, adding %s to remove",
                 workDir, netName)
        table[netName] = True
        return

    runningJobFile = localJob.running_job_file
    try:
        runningJob = RunningJob.from_file(runningJobFile)
    except JobFileOpenError as err:
        LOG.debug("no running job file for %s: %s", netName, err)
        return
    except JobFileError as err:
        LOG.warning("%s, keeping %s", err, netName)
        table[netName] = False
        return

    if runningJob.invocation_id == localJob.invocation_id:
        LOG.info("running job %s matches cleanable job %s, skipping clean up",
                 runningJob.invocation_id, localJob.invocation_id)
        table[netName] = False
        return

    LOG.debug("working directory %s reused by invocation %s (job file has %s)",
              workDir, runningJob.invocation_id, localJob.invocation_id)


def classify(inventory: Iterable[str],
             jobFiles: Iterable[str]) -> RemovabilityTable:
    table = seedRemovable(inventory)
    for jobFile in jobFiles:
        classifyJobFile(table, jobFile)
    return table


def removableNetworks(table: RemovabilityTable):
    return sorted(name for name, removable in table.items() if removable)
