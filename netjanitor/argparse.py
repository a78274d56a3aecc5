import os

from .config import DEFAULT_RC_FILE


def addArgumentParserBaseFlags(parser, logfileName):
    '''
    Adds the flags shared by every network-janitor entry point.

    Provides ALL flags required by the Config class.
    '''
    parser.add_argument(
        "-v",
        dest="verbose",
        help="Increase verbosity (multiple times for more verbose)",
        action="append_const",
        const=1)
    parser.add_argument("--rc-file", dest="rcFile",
                        help="Specify path to rc-file (default=\"%(default)s\")",
                        default=DEFAULT_RC_FILE)
    parser.add_argument(
        "--log-dir",
        dest="logDir",
        metavar="DIR",
        help="Directory for the debug log (default='%(default)s')",
        default=os.getenv('NETWORK_JANITOR_LOG_DIR', "~/.local/state/network-janitor"))
    parser.add_argument(
        "--debug",
        nargs="?",
        const=True,
        default=False,
        metavar="FILE",
        help="enable debug output to <log-dir>/%s.log, or to FILE" % logfileName)
    parser.add_argument(
        "--docker",
        metavar="PATH",
        help="The full path to the docker binary (default=/usr/bin/docker)")
    parser.add_argument(
        "--dir",
        metavar="DIR",
        help="The path to the directory containing job files "
        "(default=/opt/image-janitor)")
    parser.add_argument(
        "--sleep",
        metavar="DURATION",
        help="How long to sleep between checks, in the Go duration format "
        "(default=15s)")
    parser.add_argument(
        "--runtime",
        metavar="NAME",
        help="Container runtime adapter to use (default=docker)")
