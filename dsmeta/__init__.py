# -----------------------------------------------------------------------------
# Copyright (c) 2012 - 2018, Anaconda, Inc. and dsmeta contributors
# All rights reserved.
#
# The full license is in the LICENSE file, distributed with this software.
# -----------------------------------------------------------------------------

import importlib
import logging

__version__ = "0.1.0"

from .config import conf
from .descriptor import DatasetDescriptor
from .exceptions import (DatasetExistsError, InvalidArgumentError, MetadataAccessError,
                         MetadataException, NoSuchDatasetError)

imports = {
    "Schema": "dsmeta.schema:Schema",
    "PartitionStrategy": "dsmeta.partition:PartitionStrategy",
    "MetadataProvider": "dsmeta.providers.base:MetadataProvider",
    "FileSystemMetadataProvider": "dsmeta.providers.filesystem:FileSystemMetadataProvider",
    "MemoryMetadataProvider": "dsmeta.providers.memory:MemoryMetadataProvider",
    "registry": "dsmeta.providers:registry",
    "register_provider": "dsmeta.providers:register_provider",
    "unregister_provider": "dsmeta.providers:unregister_provider",
}
logger = logging.getLogger("dsmeta")


def __getattr__(attr):
    """Lazy attribute propagator

    Defers imports of submodules and classes until they are needed,
    according to the contents of the ``imports`` dict.
    """
    gl = globals()

    if attr in gl:
        return gl[attr]

    if attr in imports:
        dest = imports[attr]
        modname = dest.split(":", 1)[0]
        logger.debug("Importing: %s" % modname)
        mod = importlib.import_module(modname)
        if ":" in dest:
            mod = getattr(mod, dest.split(":")[1])
        gl[attr] = mod
        return mod

    raise AttributeError(attr)


def __dir__(*_, **__):
    return sorted(list(globals()) + list(imports))


def open_provider(uri=None, provider=None, **storage_options):
    """Create a MetadataProvider

    Parameters
    ----------
    uri: str, optional
        Root under which datasets are kept, local path or URL. Defaults to
        ``conf["root"]``.
    provider: str, optional
        Name of the implementation in ``dsmeta.providers.registry``, e.g.
        "filesystem" or "memory". Defaults to ``conf["provider"]``.
    storage_options:
        Passed to the provider, and so to the filesystem. Defaults to
        ``conf["storage_options"]``.

    Examples
    --------
    >>> provider = dsmeta.open_provider("memory://datasets")  # doctest: +SKIP
    >>> provider.list()  # doctest: +SKIP
    []
    """
    from .providers import registry

    uri = uri or conf["root"]
    provider = provider or conf["provider"]
    if not storage_options:
        storage_options = dict(conf["storage_options"] or {})
    if provider not in registry:
        raise InvalidArgumentError("Unknown metadata provider %r, expected one of %s"
                                   % (provider, sorted(registry)))
    logger.debug("Opening %s provider at %s", provider, uri)
    return registry[provider](uri, **storage_options)
