#-----------------------------------------------------------------------------
# Copyright (c) 2012 - 2018, Anaconda, Inc. and dsmeta contributors
# All rights reserved.
#
# The full license is in the LICENSE file, distributed with this software.
#-----------------------------------------------------------------------------
'''

'''

import logging
log = logging.getLogger(__name__)

#-----------------------------------------------------------------------------
# Imports
#-----------------------------------------------------------------------------

# Standard library imports

# External imports

# dsmeta imports
from dsmeta.cli.util import add_root_argument, print_descriptor_info, provider_from_args, Subcommand

#-----------------------------------------------------------------------------
# API
#-----------------------------------------------------------------------------

class List(Subcommand):
    ''' Show the datasets under a root

    '''

    name = "list"

    def initialize(self):
        self.parser.add_argument('--full', action='store_true')
        add_root_argument(self.parser)

    def invoke(self, args):
        provider = provider_from_args(args)
        for name in provider.list():
            if args.full:
                print_descriptor_info(provider.load(name), name)
            else:
                print(name)
