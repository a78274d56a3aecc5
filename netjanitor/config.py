import configparser
import os
import re

from .runtime import DEFAULT_DOCKER_BIN

RC_FILE_HELP = """\
Sample rcfile:
    [janitor]
    docker = /usr/bin/docker
    dir = /opt/image-janitor
    sleep = 15s  # Go duration format, e.g. 500ms, 1m30s
    runtime = docker|memory  # default=docker
"""

DEFAULT_RC_FILE = "~/.config/network-janitor.rc"
DEFAULT_JOB_DIR = "/opt/image-janitor"
DEFAULT_SLEEP = "15s"
DEFAULT_RUNTIME = "docker"

_DURATION_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,  # micro sign
    "μs": 1e-6,  # greek mu
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}
_DURATION_PART_RE = re.compile(
    r"([0-9]+(?:\.[0-9]*)?|\.[0-9]+)(ns|us|µs|μs|ms|s|m|h)")


class ConfigError(Exception):
    pass


def parseDuration(value):
    """
    Parse a Go-style duration string such as "15s" or "1h2m0.5s".

    Returns the duration in seconds as a float.
    """
    rest = value.strip() if value else ""
    sign = 1.0
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1.0
        rest = rest[1:]
    if rest == "0":
        return 0.0
    if not rest:
        raise ConfigError("invalid duration {!r}".format(value))
    total = 0.0
    pos = 0
    while pos < len(rest):
        match = _DURATION_PART_RE.match(rest, pos)
        if not match:
            raise ConfigError("invalid duration {!r}".format(value))
        total += float(match.group(1)) * _DURATION_UNITS[match.group(2)]
        pos = match.end()
    return sign * total


def _getConfig(cfgParser, section, option, defaultValue=None):
    if not cfgParser.has_section(section):
        return defaultValue
    if not cfgParser.has_option(section, option):
        return defaultValue
    return cfgParser.get(section, option)


def _pick(cliValue, cfgParser, option, defaultValue):
    if cliValue is not None:
        return cliValue
    return _getConfig(cfgParser, "janitor", option, defaultValue)


class Config(object):
    """
    Settings for one janitor process.

    Command line options win over the rc file, which wins over the built-in
    defaults.
    """

    validConfig = {
        'janitor': {'docker', 'dir', 'sleep', 'runtime'},
    }

    def _validateConfigParser(self, cfgParser):
        cfgSections = set(cfgParser.sections())
        unknownSections = cfgSections - set(self.validConfig.keys())
        if unknownSections:
            raise ConfigError(
                "RC file has unknown configuration sections: {}".format(
                    ", ".join(sorted(unknownSections))))
        for section in cfgSections:
            cfgValues = set(cfgParser.options(section))
            unknownOptions = cfgValues - self.validConfig[section]
            if unknownOptions:
                raise ConfigError(
                    "RC file has unknown configuration options in "
                    "section \"{}\": {}".format(
                        section, ", ".join(sorted(unknownOptions))))

    def __init__(self, options):
        self.options = options

        rcFile = os.path.expanduser(options.rcFile)
        cfgParser = configparser.RawConfigParser(inline_comment_prefixes=("#",))
        try:
            cfgParser.read(rcFile)
        except configparser.Error as err:
            raise ConfigError(
                "RC file {} is invalid: {}".format(rcFile, err)) from err
        self._validateConfigParser(cfgParser)

        self._dockerBin = _pick(
            options.docker, cfgParser, "docker", DEFAULT_DOCKER_BIN)
        self._jobDir = _pick(
            options.dir, cfgParser, "dir",
            os.getenv("NETWORK_JANITOR_DIR", DEFAULT_JOB_DIR))
        self._runtime = _pick(
            options.runtime, cfgParser, "runtime", DEFAULT_RUNTIME)

        sleep = _pick(options.sleep, cfgParser, "sleep", DEFAULT_SLEEP)
        self._sleepSeconds = parseDuration(sleep)
        if self._sleepSeconds <= 0:
            raise ConfigError(
                "sleep duration must be positive, got '{}'".format(sleep))

    @property
    def verbose(self):
        return self.options.verbose

    @property
    def once(self):
        return bool(self.options.once)

    @property
    def logDir(self):
        return os.path.expanduser(self.options.logDir)

    @property
    def dockerBin(self):
        return self._dockerBin

    @property
    def jobDir(self):
        return os.path.expanduser(self._jobDir)

    @property
    def runtime(self):
        return self._runtime

    @property
    def sleepSeconds(self):
        return self._sleepSeconds
