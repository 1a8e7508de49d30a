#-----------------------------------------------------------------------------
# Copyright (c) 2012 - 2018, Anaconda, Inc. and dsmeta contributors
# All rights reserved.
#
# The full license is in the LICENSE file, distributed with this software.
#-----------------------------------------------------------------------------

from .config import Config
from .create import Create
from .delete import Delete
from .describe import Describe
from .exists import Exists
from .list import List

all  = (Config, Create, Delete, Describe, Exists, List)
