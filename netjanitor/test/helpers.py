from contextlib import contextmanager
from io import StringIO
import json
import os
import sys

UUID1 = "11111111-1111-1111-1111-111111111111"
UUID2 = "22222222-2222-2222-2222-222222222222"
NET1 = "11111111111111111111111111111111_default"
NET2 = "22222222222222222222222222222222_default"


def resetEnv():
    for var in ('NETWORK_JANITOR_DIR', 'NETWORK_JANITOR_LOG_DIR'):
        if var in os.environ:
            del os.environ[var]


def writeJson(path, data):
    with open(path, "w") as fp:
        if isinstance(data, str):
            fp.write(data)
        else:
            json.dump(data, fp)
    return path


def writeJobFile(jobDir, uuid, workDir, invocation=None):
    '''
    Write <jobDir>/<uuid>.json the way the scheduler does. The invocation id
    defaults to the job uuid.
    '''
    return writeJson(os.path.join(jobDir, uuid + ".json"), {
        "uuid": invocation or uuid,
        "local_working_directory": workDir,
    })


def writeRunningJob(workDir, invocation):
    os.makedirs(workDir, exist_ok=True)
    return writeJson(os.path.join(workDir, "job"), {"uuid": invocation})


@contextmanager
def capturedOutput():
    ''' Used to capture stdout or stderr.
    eg.
    with capturedOutput() as (out, err):
        print("foo")

    self.assertEqual(out.getvalue(), "foo")
    '''
    newOut, newErr = StringIO(), StringIO()
    oldOut, oldErr = sys.stdout, sys.stderr
    try:
        sys.stdout, sys.stderr = newOut, newErr
        yield sys.stdout, sys.stderr
    finally:
        sys.stdout, sys.stderr = oldOut, oldErr
