"""
Naming conventions shared by the job scheduler and the container runtime.

A job file is named after the job's UUID, and the runtime network created
for that job is the UUID with the hyphens removed plus a ``_default`` suffix.
"""

import os
import re

JOB_FILE_SUFFIX = ".json"
NETWORK_SUFFIX = "_default"

JOB_FILE_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}\.json\Z",
    re.IGNORECASE)
NETWORK_RE = re.compile(r"^[0-9a-f]{32}_default\Z", re.IGNORECASE)


def to_job_uuid(job_file: str) -> str:
    """Return the job UUID encoded in the base name of ``job_file``."""
    name = os.path.basename(job_file)
    if name.endswith(JOB_FILE_SUFFIX):
        name = name[:-len(JOB_FILE_SUFFIX)]
    return name


def to_network_name(job_uuid: str) -> str:
    return job_uuid.replace("-", "") + NETWORK_SUFFIX


def is_janitor_network(name: str) -> bool:
    return NETWORK_RE.match(name) is not None
