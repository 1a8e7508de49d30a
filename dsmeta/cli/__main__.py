#-----------------------------------------------------------------------------
# Copyright (c) 2012 - 2018, Anaconda, Inc. and dsmeta contributors
# All rights reserved.
#
# The full license is in the LICENSE file, distributed with this software.
#-----------------------------------------------------------------------------


# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

import logging

# Standard library imports
import sys

# dsmeta imports
from . import subcommands

# External imports

log = logging.getLogger("dsmeta")

# -----------------------------------------------------------------------------
# API
# -----------------------------------------------------------------------------


def main(argv=None):
    """Execute the "dsmeta" command line program."""
    from dsmeta.cli.bootstrap import main as _main

    return _main("dsmeta dataset metadata CLI", subcommands.all, argv or sys.argv)


if __name__ == "__main__":
    sys.exit(main(sys.argv))
