# -----------------------------------------------------------------------------
# Copyright (c) 2012 - 2018, Anaconda, Inc. and dsmeta contributors
# All rights reserved.
#
# The full license is in the LICENSE file, distributed with this software.
# -----------------------------------------------------------------------------

from ..exceptions import InvalidArgumentError


class MetadataProvider(object):
    """Stores and retrieves dataset descriptors by name

    This is the base class for all dsmeta providers. Implementations are
    chosen by name when a provider is opened (see
    ``dsmeta.providers.registry``), and must override every method that
    raises NotImplementedError here.
    """

    name = None

    def load(self, name):
        """Descriptor of the named dataset

        Raises NoSuchDatasetError if there is none.
        """
        raise NotImplementedError

    def create(self, name, descriptor):
        """Record a descriptor for a new dataset

        Returns the descriptor as persisted. Raises DatasetExistsError if the
        name is taken.
        """
        raise NotImplementedError

    def update(self, name, descriptor):
        """Replace the descriptor of an existing dataset

        Raises NoSuchDatasetError if there is none.
        """
        raise NotImplementedError

    def delete(self, name):
        """Remove a dataset's metadata; False if there was nothing to remove"""
        raise NotImplementedError

    def exists(self, name):
        raise NotImplementedError

    def list(self):
        """Names of all datasets known to this provider"""
        raise NotImplementedError

    def __contains__(self, name):
        return self.exists(name)

    def __iter__(self):
        return iter(self.list())


def check_argument(value, what):
    if value is None:
        raise InvalidArgumentError("%s cannot be None" % what)
