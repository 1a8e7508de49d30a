# -----------------------------------------------------------------------------
# Copyright (c) 2012 - 2018, Anaconda, Inc. and dsmeta contributors
# All rights reserved.
#
# The full license is in the LICENSE file, distributed with this software.
# -----------------------------------------------------------------------------

import logging

import fsspec

from .config import conf
from .exceptions import InvalidArgumentError
from .partition import PartitionStrategy
from .schema import Schema

logger = logging.getLogger("dsmeta")

# format tags understood by readers and writers
AVRO = "avro"
PARQUET = "parquet"
CSV = "csv"
formats = (AVRO, PARQUET, CSV)

# extended property recording which filesystem a dataset's data belongs to
FILE_SYSTEM_URI_PROPERTY = "dsmeta.filesystem.uri"

_unset = object()


class DatasetDescriptor(object):
    """The metadata describing one dataset

    Parameters
    ----------
    schema: Schema, dict or str
        The record schema. A str is taken as a URI of a schema file, which is
        only read the first time ``.schema`` is accessed.
    format: str, optional
        Storage format tag; defaults to ``conf["default_format"]``
    partition_strategy: PartitionStrategy or str, optional
        A str is parsed as a partition expression
    location: str, optional
        Fully-qualified URI of the data
    properties: dict of str, optional
        Extended properties
    storage_options: dict, optional
        Used only to open a schema given by URI
    """

    def __init__(self, schema, format=None, partition_strategy=None,
                 location=None, properties=None, storage_options=None):
        if schema is None:
            raise InvalidArgumentError("Schema cannot be None")
        if isinstance(schema, str):
            self._schema = None
            self._schema_uri = schema
        else:
            self._schema = schema if isinstance(schema, Schema) else Schema(schema)
            self._schema_uri = None
        self.format = format or conf["default_format"]
        if isinstance(partition_strategy, str):
            partition_strategy = PartitionStrategy.parse(partition_strategy)
        self.partition_strategy = partition_strategy
        self.location = str(location) if location is not None else None
        self.properties = dict(properties or {})
        for key, value in self.properties.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise InvalidArgumentError("Properties must map str to str, got %r=%r" % (key, value))
        self.storage_options = storage_options or {}

    @property
    def schema(self):
        if self._schema is None:
            logger.debug("Reading schema from %s", self._schema_uri)
            with fsspec.open(self._schema_uri, mode="rt", encoding="utf-8",
                             **self.storage_options) as f:
                self._schema = Schema.parse(f.read())
        return self._schema

    @property
    def schema_uri(self):
        """Where the schema will be read from, None if given in memory"""
        return self._schema_uri

    @property
    def is_partitioned(self):
        return self.partition_strategy is not None

    def copy(self, schema=_unset, format=_unset, partition_strategy=_unset,
             location=_unset, properties=_unset):
        """New descriptor with the given fields replaced"""
        if schema is _unset:
            schema = self._schema if self._schema is not None else self._schema_uri
        return DatasetDescriptor(
            schema=schema,
            format=self.format if format is _unset else format,
            partition_strategy=(self.partition_strategy if partition_strategy is _unset
                                else partition_strategy),
            location=self.location if location is _unset else location,
            properties=self.properties if properties is _unset else properties,
            storage_options=self.storage_options,
        )

    def with_property(self, key, value):
        props = dict(self.properties)
        props[key] = value
        return self.copy(properties=props)

    def describe(self):
        """Plain-dict summary, for display"""
        return {
            "schema": self._schema_uri or self.schema.to_canonical_text(pretty=False),
            "format": self.format,
            "partition_strategy": (self.partition_strategy.to_expression()
                                   if self.is_partitioned else None),
            "location": self.location,
            "properties": dict(self.properties),
        }

    def __eq__(self, other):
        if not isinstance(other, DatasetDescriptor):
            return False
        return (
            self.schema == other.schema
            and self.format == other.format
            and self.partition_strategy == other.partition_strategy
            and self.location == other.location
            and self.properties == other.properties
        )

    __hash__ = None

    def __repr__(self):
        return "<DatasetDescriptor format=%s location=%s partitioned=%s>" % (
            self.format, self.location, self.is_partitioned)
