"""
Domain models for network-janitor.

Job descriptors and the naming conventions that tie a job to its network.
Nothing in here talks to the container runtime.
"""

from .job import CleanableJob, RunningJob
from .naming import (
    JOB_FILE_RE,
    NETWORK_RE,
    is_janitor_network,
    to_job_uuid,
    to_network_name,
)

__all__ = [
    "CleanableJob",
    "RunningJob",
    "JOB_FILE_RE",
    "NETWORK_RE",
    "is_janitor_network",
    "to_job_uuid",
    "to_network_name",
]
