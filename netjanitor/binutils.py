from .config import DEFAULT_RC_FILE, RC_FILE_HELP


def binDescriptionWithStandardFooter(desc):
    return """{desc}


Configuration:
    The default configuration file location is `{rcfile}`, but can be
    overwritten using the --rc-file option. Command line flags take
    precedence over the configuration file.

{rchelp}
""".format(desc=desc.strip(), rcfile=DEFAULT_RC_FILE, rchelp=RC_FILE_HELP)
