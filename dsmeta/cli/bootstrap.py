#-----------------------------------------------------------------------------
# Copyright (c) 2012 - 2018, Anaconda, Inc. and dsmeta contributors
# All rights reserved.
#
# The full license is in the LICENSE file, distributed with this software.
#-----------------------------------------------------------------------------
""" Build the argument parser from the subcommands and run one.

"""

import logging

log = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

# Standard library imports
import argparse

# dsmeta imports
from dsmeta import __version__
from dsmeta.cli.util import die, nice_join

# -----------------------------------------------------------------------------
# API
# -----------------------------------------------------------------------------


def main(description, subcommands, argv):
    """Run the subcommand named in ``argv``

    Returns the exit status. Any error raised by the subcommand is reported
    as ``ERROR: <repr>`` on stderr, with status 1.
    """
    if len(argv) == 1:
        die("ERROR: Must specify subcommand, one of: %s" % nice_join(x.name for x in subcommands))

    parser = argparse.ArgumentParser(prog=argv[0], description=description)
    parser.add_argument("-v", "--version", action="version", version=__version__)
    subs = parser.add_subparsers(help="Sub-commands")
    for cls in subcommands:
        subparser = subs.add_parser(cls.name, help=cls.__doc__.strip())
        subparser.set_defaults(invoke=cls(parser=subparser).invoke)

    args = parser.parse_args(argv[1:])
    try:
        return args.invoke(args) or 0
    except Exception as e:
        log.debug("Command failed", exc_info=True)
        die("ERROR: " + repr(e))
