import logging
import os
import stat

from .domain import JOB_FILE_RE

LOG = logging.getLogger(__name__)


def isRegularFile(path):
    try:
        mode = os.stat(path).st_mode
    except OSError:
        LOG.debug("stat %s failed", path, exc_info=True)
        return False
    return stat.S_ISREG(mode)


def jobFiles(jobDir, fnameRegex=JOB_FILE_RE):
    """
    List the job files in jobDir whose names match fnameRegex.

    Only regular files (or links to them) are returned. Raises OSError if the
    directory cannot be listed.
    """
    found = []
    for name in sorted(os.listdir(jobDir)):
        if not fnameRegex.match(name):
            continue
        path = os.path.join(jobDir, name)
        if not isRegularFile(path):
            LOG.debug("skipping non-regular entry %s", path)
            continue
        found.append(path)
    return found
