# -----------------------------------------------------------------------------
# Copyright (c) 2012 - 2018, Anaconda, Inc. and dsmeta contributors
# All rights reserved.
#
# The full license is in the LICENSE file, distributed with this software.
# -----------------------------------------------------------------------------

import copy
import logging

from ..descriptor import FILE_SYSTEM_URI_PROPERTY
from ..exceptions import DatasetExistsError, NoSuchDatasetError
from .base import MetadataProvider, check_argument

logger = logging.getLogger("dsmeta")


class MemoryMetadataProvider(MetadataProvider):
    """Keeps descriptors in a dict, for the life of the instance

    Useful in tests and for short-lived sessions. Descriptors are stored
    and returned as deep copies, so nothing is serialized and nothing is
    shared with callers.
    """

    name = "memory"
    uri = "memory:///"

    def __init__(self, root=None, **storage_options):
        # "memory://datasets", "/datasets" and "datasets" are the same root
        path = (root or "").split("::", 1)[0].split("://", 1)[-1].strip("/")
        self.root = "/" + path if path else ""
        self._descriptors = {}

    def load(self, name):
        check_argument(name, "Name")
        logger.debug("Loading dataset metadata name:%s", name)
        try:
            return copy.deepcopy(self._descriptors[name])
        except KeyError:
            raise NoSuchDatasetError(name=name)

    def create(self, name, descriptor):
        check_argument(name, "Name")
        check_argument(descriptor, "Descriptor")
        logger.debug("Saving dataset metadata name:%s descriptor:%s", name, descriptor)
        if name in self._descriptors:
            raise DatasetExistsError(name=name)
        location = descriptor.location or "memory://%s/%s" % (
            self.root, name.replace(".", "/"))
        new_descriptor = descriptor.copy(location=location).with_property(
            FILE_SYSTEM_URI_PROPERTY, self.uri)
        self._descriptors[name] = copy.deepcopy(new_descriptor)
        return new_descriptor

    def update(self, name, descriptor):
        check_argument(name, "Name")
        check_argument(descriptor, "Descriptor")
        logger.debug("Saving dataset metadata name:%s descriptor:%s", name, descriptor)
        if name not in self._descriptors:
            raise NoSuchDatasetError(name=name)
        self._descriptors[name] = copy.deepcopy(descriptor)
        return descriptor

    def delete(self, name):
        check_argument(name, "Name")
        logger.debug("Deleting dataset metadata name:%s", name)
        return self._descriptors.pop(name, None) is not None

    def exists(self, name):
        check_argument(name, "Name")
        return name in self._descriptors

    def list(self):
        return sorted(self._descriptors)

    def __repr__(self):
        return "<%s datasets=%d>" % (self.__class__.__name__, len(self._descriptors))
