"""Exception hierarchy for network-janitor."""


class JanitorError(Exception):
    pass


class JobFileError(JanitorError):
    """
    Base for failures reading a job descriptor.

    Carries the offending path so that log lines identify the file.
    """

    action = "process"

    def __init__(self, path, cause):
        super().__init__(path, cause)
        self.path = path
        self.cause = cause

    def __str__(self):
        return "failed to {} {}: {}".format(self.action, self.path, self.cause)


class JobFileOpenError(JobFileError):
    action = "open"


class JobFileReadError(JobFileError):
    action = "read"


class JobFileParseError(JobFileError):
    action = "parse JSON from"


class RuntimeCommandError(JanitorError):
    def __init__(self, cmd, cause):
        super().__init__(cmd, cause)
        self.cmd = list(cmd)
        self.cause = cause

    def __str__(self):
        return "command {!r} failed: {}".format(" ".join(self.cmd), self.cause)
