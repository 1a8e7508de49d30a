#-----------------------------------------------------------------------------
# Copyright (c) 2012 - 2018, Anaconda, Inc. and dsmeta contributors
# All rights reserved.
#
# The full license is in the LICENSE file, distributed with this software.
#-----------------------------------------------------------------------------


class MetadataException(Exception):
    """Basic exception for errors raised by metadata providers"""


class InvalidArgumentError(MetadataException, ValueError):
    """A required input is missing, or a descriptor cannot be accepted as
    given (e.g., its location lives on a different filesystem than the
    provider's root).
    """


class NoSuchDatasetError(MetadataException):
    """The named dataset has no metadata directory"""
    def __init__(self, msg=None, name=None):
        if msg is None:
            msg = "No such dataset: %s" % name
        super(NoSuchDatasetError, self).__init__(msg)
        self.name = name


class DatasetExistsError(MetadataException):
    """Attempt to create a dataset whose metadata directory already exists"""
    def __init__(self, msg=None, name=None):
        if msg is None:
            msg = "Dataset already exists: %s" % name
        super(DatasetExistsError, self).__init__(msg)
        self.name = name


class MetadataAccessError(MetadataException):
    """The underlying filesystem failed while reading, writing or deleting
    metadata. The original error is available as ``__cause__``.
    """
    def __init__(self, msg, name=None, path=None):
        super(MetadataAccessError, self).__init__(msg)
        self.name = name
        self.path = path
