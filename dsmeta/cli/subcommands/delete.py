#-----------------------------------------------------------------------------
# Copyright (c) 2012 - 2018, Anaconda, Inc. and dsmeta contributors
# All rights reserved.
#
# The full license is in the LICENSE file, distributed with this software.
#-----------------------------------------------------------------------------
"""

"""

import logging

log = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

# Standard library imports

# External imports

# dsmeta imports
from dsmeta.cli.util import add_root_argument, provider_from_args, Subcommand

# -----------------------------------------------------------------------------
# API
# -----------------------------------------------------------------------------


class Delete(Subcommand):
    """Delete a dataset's metadata, leaving its data files"""

    name = "delete"

    def initialize(self):
        add_root_argument(self.parser)
        self.parser.add_argument("name", metavar="NAME", type=str, help="Dataset name")

    def invoke(self, args):
        provider = provider_from_args(args)
        print(provider.delete(args.name))
