# -----------------------------------------------------------------------------
# Copyright (c) 2012 - 2018, Anaconda, Inc. and dsmeta contributors
# All rights reserved.
#
# The full license is in the LICENSE file, distributed with this software.
# -----------------------------------------------------------------------------

import pytest

from dsmeta.descriptor import FILE_SYSTEM_URI_PROPERTY, DatasetDescriptor
from dsmeta.exceptions import DatasetExistsError, InvalidArgumentError, NoSuchDatasetError
from dsmeta.providers.memory import MemoryMetadataProvider
from dsmeta.schema import Schema

SCHEMA = Schema.parse('{"type": "record", "name": "R", "fields": [{"name": "x", "type": "int"}]}')


@pytest.fixture
def provider():
    return MemoryMetadataProvider("/datasets")


def test_create_load(provider):
    created = provider.create("a.b", DatasetDescriptor(SCHEMA, format="csv"))
    assert created.location == "memory:///datasets/a/b"
    assert created.properties[FILE_SYSTEM_URI_PROPERTY] == "memory:///"

    loaded = provider.load("a.b")
    assert loaded == created
    assert loaded is not created


def test_create_twice(provider):
    provider.create("a", DatasetDescriptor(SCHEMA))
    with pytest.raises(DatasetExistsError):
        provider.create("a", DatasetDescriptor(SCHEMA, format="csv"))
    assert provider.load("a").format == "avro"


def test_missing(provider):
    with pytest.raises(NoSuchDatasetError):
        provider.load("a")
    with pytest.raises(NoSuchDatasetError):
        provider.update("a", DatasetDescriptor(SCHEMA))
    assert provider.delete("a") is False
    assert not provider.exists("a")


def test_update_delete_list(provider):
    assert provider.list() == []
    provider.create("b", DatasetDescriptor(SCHEMA))
    provider.create("a", DatasetDescriptor(SCHEMA))
    new = DatasetDescriptor(SCHEMA, format="parquet")
    assert provider.update("a", new) is new
    assert provider.load("a").format == "parquet"
    assert provider.list() == ["a", "b"]

    assert provider.delete("a") is True
    assert provider.list() == ["b"]
    assert "b" in provider


def test_none_arguments(provider):
    with pytest.raises(InvalidArgumentError):
        provider.load(None)
    with pytest.raises(InvalidArgumentError):
        provider.create("a", None)


@pytest.mark.parametrize("root", [None, "", "memory://", "memory://datasets", "datasets/"])
def test_root_forms(root):
    p = MemoryMetadataProvider(root)
    location = p.create("a", DatasetDescriptor(SCHEMA)).location
    if root and "datasets" in root:
        assert location == "memory:///datasets/a"
    else:
        assert location == "memory:///a"


def test_stored_descriptor_is_not_shared(provider):
    schema = Schema.parse('{"type": "record", "name": "R", "fields": [{"name": "id", "type": "long"}]}')
    provider.create("a", DatasetDescriptor(schema, properties={"k": "v"}))

    schema["fields"].append({"name": "from_caller", "type": "int"})
    loaded = provider.load("a")
    loaded.schema["fields"].append({"name": "from_load", "type": "int"})
    loaded.properties["k"] = "changed"

    again = provider.load("a")
    assert again.schema.fields == ["id"]
    assert again.properties["k"] == "v"

    updated = DatasetDescriptor(schema, format="csv")
    provider.update("a", updated)
    schema["fields"].clear()
    assert provider.load("a").schema.fields == ["id", "from_caller"]
