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
import fsspec

# dsmeta imports
from dsmeta import DatasetDescriptor
from dsmeta.cli.util import add_root_argument, provider_from_args, Subcommand
from dsmeta.schema import Schema

#-----------------------------------------------------------------------------
# API
#-----------------------------------------------------------------------------

class Create(Subcommand):
    ''' Create a dataset from a schema file

    '''

    name = "create"

    def initialize(self):
        add_root_argument(self.parser)
        self.parser.add_argument('name', metavar='NAME', type=str, help='Dataset name')
        self.parser.add_argument('--schema', metavar='FILE', type=str, required=True,
                                 help='Path or URL of a JSON schema file')
        self.parser.add_argument('--format', type=str, default=None, help='Storage format tag')
        self.parser.add_argument('--partition', metavar='EXPR', type=str, default=None,
                                 help='Partition expression')
        self.parser.add_argument('--location', metavar='URI', type=str, default=None,
                                 help='Data location, if not under the root')

    def invoke(self, args):
        with fsspec.open(args.schema, mode='rt', encoding='utf-8') as f:
            schema = Schema.parse(f.read())
        descriptor = DatasetDescriptor(schema, format=args.format,
                                       partition_strategy=args.partition,
                                       location=args.location)
        provider = provider_from_args(args)
        created = provider.create(args.name, descriptor)
        print(created.location)
