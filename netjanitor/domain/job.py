"""
Job descriptors read from disk.

Both descriptors are written by other parties (the scheduler writes the
cleanable job file, the running job maintains its own ``job`` file) and are
only ever read here.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Any, Dict

import simplejson as json

from ..errors import JobFileOpenError, JobFileParseError, JobFileReadError

RUNNING_JOB_FILE_NAME = "job"


def _load_json_object(path: str) -> Dict[str, Any]:
    try:
        fp = open(path, "rb")
    except IsADirectoryError as err:
        # A directory is present but unreadable, like a failed read.
        raise JobFileReadError(path, err) from err
    except OSError as err:
        raise JobFileOpenError(path, err) from err
    with fp:
        try:
            raw = fp.read()
            text = raw.decode("utf-8")
        except (OSError, UnicodeDecodeError) as err:
            raise JobFileReadError(path, err) from err
    try:
        data = json.loads(text)
    except json.JSONDecodeError as err:
        raise JobFileParseError(path, err) from err
    if not isinstance(data, dict):
        raise JobFileParseError(
            path, "expected a JSON object, got {}".format(type(data).__name__))
    return data


def _string_field(path: str, data: Dict[str, Any], key: str) -> str:
    if key not in data:
        raise JobFileParseError(path, "missing field {!r}".format(key))
    value = data[key]
    if not isinstance(value, str):
        raise JobFileParseError(
            path, "field {!r} must be a string, got {}".format(
                key, type(value).__name__))
    return value


@dataclass(frozen=True)
class CleanableJob:
    """
    A job the janitor knows about, read from ``<job-dir>/<uuid>.json``.

    ``invocation_id`` comes from the ``uuid`` key and identifies this
    particular invocation of the job.
    """

    invocation_id: str
    local_working_directory: str

    @classmethod
    def from_file(cls, path: str) -> CleanableJob:
        data = _load_json_object(path)
        return cls(
            invocation_id=_string_field(path, data, "uuid"),
            local_working_directory=_string_field(
                path, data, "local_working_directory"),
        )

    @property
    def running_job_file(self) -> str:
        return os.path.join(self.local_working_directory, RUNNING_JOB_FILE_NAME)


@dataclass(frozen=True)
class RunningJob:
    """The ``job`` file maintained by a job inside its working directory."""

    invocation_id: str

    @classmethod
    def from_file(cls, path: str) -> RunningJob:
        data = _load_json_object(path)
        return cls(invocation_id=_string_field(path, data, "uuid"))
