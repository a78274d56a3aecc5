import logging
import os
import sys


def getLogger(name):
    return logging.getLogger(name)


def setup(logDir, debugLogFileName, debug=False, verbose=False):
    """
    Configure the root logger.

    With ``debug`` set, everything at DEBUG goes to a log file: either
    ``debug`` itself when it is a path, or ``<logDir>/<debugLogFileName>.log``.
    Otherwise INFO (DEBUG with ``verbose``) goes to stderr.
    """
    fmt = (
        '+%(process)-6d %(levelname)-9s '
        '%(name)-24s %(filename)20s:%(lineno)-5d '
        '[%(asctime)s] %(message)s')
    if debug:
        if isinstance(debug, str):
            logFileName = os.path.expanduser(debug)
        else:
            os.makedirs(logDir, exist_ok=True)
            logFileName = os.path.join(logDir, debugLogFileName + ".log")
        logging.basicConfig(
            filename=logFileName,
            level=logging.DEBUG,
            format=fmt)
    else:
        level = logging.DEBUG if verbose else logging.INFO
        logging.basicConfig(stream=sys.stderr, level=level, format=fmt)
