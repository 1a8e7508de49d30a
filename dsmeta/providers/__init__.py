# -----------------------------------------------------------------------------
# Copyright (c) 2012 - 2018, Anaconda, Inc. and dsmeta contributors
# All rights reserved.
#
# The full license is in the LICENSE file, distributed with this software.
# -----------------------------------------------------------------------------

import logging
from collections.abc import MappingView

import entrypoints

from .base import MetadataProvider

logger = logging.getLogger("dsmeta")

builtin = {
    "filesystem": "dsmeta.providers.filesystem:FileSystemMetadataProvider",
    "memory": "dsmeta.providers.memory:MemoryMetadataProvider",
}
_registered = {}


def import_name(name):
    import importlib

    if ":" in name:
        if name.count(":") > 1:
            raise ValueError("Cannot decipher name to import: %s" % name)
        mod, rest = name.split(":")
        bit = importlib.import_module(mod)
        for part in rest.split("."):
            bit = getattr(bit, part)
        return bit
    else:
        mod, cls = name.rsplit(".", 1)
        module = importlib.import_module(mod)
        return getattr(module, cls)


def enabled_providers():
    """Map of name to provider class, EntryPoint or import string

    Explicit registration wins over entry points, which win over built-ins.
    """
    out = dict(builtin)
    out.update(entrypoints.get_group_named("dsmeta.providers"))
    out.update(_registered)
    return out


def register_provider(name, provider, clobber=False):
    """Make a provider class available under ``name``

    Parameters
    ----------
    name: str
    provider: MetadataProvider subclass or "module:Class" str
    clobber: bool
        Whether to replace an existing registration
    """
    if name in _registered and not clobber:
        raise ValueError("Provider %r is already registered" % name)
    _registered[name] = provider


def unregister_provider(name):
    return _registered.pop(name, None)


class ProviderRegistry(MappingView):
    """Dict of name: MetadataProvider class

    If the value object is an EntryPoint or str, will load it when accessed,
    which does the import.
    """

    def __init__(self):
        self._mapping = None

    def __getitem__(self, item):
        it = enabled_providers()[item]
        if isinstance(it, entrypoints.EntryPoint):
            return it.load()
        elif isinstance(it, str):
            return import_name(it)
        elif isinstance(it, type) and issubclass(it, MetadataProvider):
            return it
        raise ValueError("Provider %r is not a MetadataProvider: %r" % (item, it))

    def __iter__(self):
        return iter(enabled_providers())

    def keys(self):
        return list(self)

    def __len__(self):
        return len(enabled_providers())

    def __repr__(self):
        return "<dsmeta provider registry>"

    def __contains__(self, item):
        return item in enabled_providers()


registry = ProviderRegistry()
