#-----------------------------------------------------------------------------
# Copyright (c) 2012 - 2018, Anaconda, Inc. and dsmeta contributors
# All rights reserved.
#
# The full license is in the LICENSE file, distributed with this software.
#-----------------------------------------------------------------------------
''' Helpers shared by the dsmeta subcommands.

'''

import logging
log = logging.getLogger(__name__)

#-----------------------------------------------------------------------------
# Imports
#-----------------------------------------------------------------------------

# Standard library imports
import sys

# External imports

# dsmeta imports
from dsmeta import open_provider

#-----------------------------------------------------------------------------
# API
#-----------------------------------------------------------------------------

def die(message, status=1):
    ''' Write ``message`` to stderr and exit with ``status``.

    '''
    print(message, file=sys.stderr)
    sys.exit(status)

def nice_join(seq):
    ''' Subcommand names as a phrase, e.g. ``"list, create or delete"``

    '''
    seq = [str(x) for x in seq]
    if len(seq) <= 1:
        return "".join(seq)
    return "%s or %s" % (", ".join(seq[:-1]), seq[-1])

def print_descriptor_info(descriptor, name):
    ''' Print each field of a descriptor as ``[name] key=value``.

    '''
    info = descriptor.describe()
    for key in sorted(info):
        print("[{}] {}={}".format(name, key, info[key]))

def add_root_argument(parser):
    parser.add_argument('root', metavar='ROOT', type=str, help='Root URI of the dataset store')
    parser.add_argument('--provider', type=str, default=None,
                        help='Metadata provider implementation (default from config)')

def provider_from_args(args):
    ''' Open the provider named on the command line, at its ROOT

    '''
    return open_provider(args.root, provider=args.provider)

class Subcommand(object):
    ''' Base for dsmeta subcommands

    Subclasses set ``name``, used as the subparser name, and a docstring,
    used as its help. They implement ``initialize()`` to add arguments to
    ``self.parser`` and ``invoke(args)`` to run.

    '''

    def __init__(self, parser):
        self.parser = parser
        self.initialize()

    def initialize(self):
        raise NotImplementedError("Subclasses must implement initialize()")

    def invoke(self, args):
        raise NotImplementedError("Subclasses must implement invoke()")
