#!/usr/bin/env python
import argparse
from importlib import metadata
import os
import sys

import netjanitor.logging

from .argparse import addArgumentParserBaseFlags
from .binutils import binDescriptionWithStandardFooter
from .config import Config, ConfigError
from .reconciler import Ticker, installSignalHandlers, runCycle, runForever
from .runtime import NetworkRuntime
from .service import service
from .service.registry import registerServices, runtimeNames

_DEBUG_LOG_FILE_NAME = "network-janitor-debug"
LOG = netjanitor.logging.getLogger(__name__)

DESC = binDescriptionWithStandardFooter("""
network-janitor - remove container networks left behind by finished jobs

Every job file <uuid>.json in the job directory names a network
<uuid-without-hyphens>_default. A network is removed once the job's
local_working_directory is gone, and kept while the `job` file in that
directory reports the same invocation uuid.

Examples:
    # Check every 15 seconds using /usr/bin/docker
    $ network-janitor

    # Run a single cycle against a different job directory
    $ network-janitor --once --dir /var/lib/jobs
""")


def parseArgs(args=None):
    if args is None:
        prog = sys.argv[0]
        args = sys.argv[1:]
    else:
        prog = None

    op = argparse.ArgumentParser(
        prog=os.path.basename(prog) if prog else "network-janitor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=DESC)
    addArgumentParserBaseFlags(op, _DEBUG_LOG_FILE_NAME)
    op.add_argument("--once", action="store_true",
                    help="Run a single cycle and exit")
    op.add_argument("--version", action="store_true",
                    help="Show the version and exit")
    return op.parse_args(args)


def makeRuntime(config: Config) -> NetworkRuntime:
    try:
        factory = service().runtime.get(config.runtime)
    except KeyError as err:
        raise ConfigError("unknown runtime {!r}, valid options: {}".format(
            config.runtime, ", ".join(runtimeNames()))) from err
    return factory.fromConfig(config)


def impl_main(args=None):
    registerServices()

    options = parseArgs(args)
    if options.version:
        version = metadata.version("network-janitor")
        print(f"Version {version}")
        return 0

    config = Config(options)
    runtime = makeRuntime(config)

    netjanitor.logging.setup(
        config.logDir,
        _DEBUG_LOG_FILE_NAME,
        debug=options.debug,
        verbose=options.verbose)
    LOG.debug("starting with args %s", options)
    LOG.debug("python: %s", sys.version)
    LOG.info("watching %s with runtime %s", config.jobDir, config.runtime)

    if config.once:
        runCycle(runtime, config.jobDir)
        return 0

    ticker = Ticker(config.sleepSeconds)
    installSignalHandlers(ticker)
    runForever(runtime, config.jobDir, ticker)
    return 0


def main(args=None):
    try:
        rc = impl_main(args=args)
    except ConfigError as error:
        print("Error:", error, file=sys.stderr)
        sys.exit(2)
    sys.exit(rc)


if __name__ == "__main__":
    main()
