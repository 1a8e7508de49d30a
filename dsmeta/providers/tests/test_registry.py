# -----------------------------------------------------------------------------
# Copyright (c) 2012 - 2018, Anaconda, Inc. and dsmeta contributors
# All rights reserved.
#
# The full license is in the LICENSE file, distributed with this software.
# -----------------------------------------------------------------------------

import pytest

import dsmeta
from dsmeta.exceptions import InvalidArgumentError
from dsmeta.providers import (import_name, register_provider, registry,
                              unregister_provider)
from dsmeta.providers.base import MetadataProvider
from dsmeta.providers.filesystem import FileSystemMetadataProvider
from dsmeta.providers.memory import MemoryMetadataProvider


class NullProvider(MetadataProvider):
    name = "null"

    def __init__(self, root, **kwargs):
        self.root = root

    def list(self):
        return []


@pytest.fixture
def null_provider():
    register_provider("null", NullProvider)
    yield NullProvider
    unregister_provider("null")


def test_builtins():
    assert "filesystem" in registry
    assert "memory" in registry
    assert registry["filesystem"] is FileSystemMetadataProvider
    assert registry["memory"] is MemoryMetadataProvider


def test_register(null_provider):
    assert registry["null"] is null_provider
    assert "null" in registry.keys()
    with pytest.raises(ValueError):
        register_provider("null", NullProvider)
    register_provider("null", "dsmeta.providers.memory:MemoryMetadataProvider", clobber=True)
    assert registry["null"] is MemoryMetadataProvider


def test_register_not_a_provider():
    register_provider("bad", dict)
    try:
        with pytest.raises(ValueError):
            registry["bad"]
    finally:
        unregister_provider("bad")


def test_import_name():
    assert import_name("dsmeta.providers.memory:MemoryMetadataProvider") is MemoryMetadataProvider
    assert import_name("dsmeta.providers.memory.MemoryMetadataProvider") is MemoryMetadataProvider
    with pytest.raises(ValueError):
        import_name("a:b:c")


def test_open_provider(memory_root, null_provider):
    p = dsmeta.open_provider(memory_root)
    assert isinstance(p, FileSystemMetadataProvider)
    assert p.root_uri == memory_root

    assert isinstance(dsmeta.open_provider("x", provider="memory"), MemoryMetadataProvider)
    p = dsmeta.open_provider("x", provider="null")
    assert isinstance(p, NullProvider)
    assert list(p) == []


def test_open_provider_from_conf(memory_root):
    with dsmeta.conf.set(root=memory_root, provider="memory"):
        p = dsmeta.open_provider()
    assert isinstance(p, MemoryMetadataProvider)
    assert p.root == memory_root


def test_open_unknown_provider():
    with pytest.raises(InvalidArgumentError):
        dsmeta.open_provider("x", provider="nope")


def test_base_is_abstract():
    p = MetadataProvider()
    for method, args in [("load", ("a",)), ("create", ("a", None)), ("update", ("a", None)),
                         ("delete", ("a",)), ("exists", ("a",)), ("list", ())]:
        with pytest.raises(NotImplementedError):
            getattr(p, method)(*args)


def test_lazy_top_level():
    assert dsmeta.FileSystemMetadataProvider is FileSystemMetadataProvider
    assert dsmeta.registry is registry
    assert "Schema" in dir(dsmeta)
    with pytest.raises(AttributeError):
        dsmeta.not_a_thing
