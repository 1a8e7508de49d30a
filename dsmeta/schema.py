# -----------------------------------------------------------------------------
# Copyright (c) 2012 - 2018, Anaconda, Inc. and dsmeta contributors
# All rights reserved.
#
# The full license is in the LICENSE file, distributed with this software.
# -----------------------------------------------------------------------------
"""
Dataset schemas, held as Avro-style JSON definitions
"""

import json

from .exceptions import InvalidArgumentError


class Schema(dict):
    """Structural type definition of a dataset's records

    A record schema looks like::

        {"type": "record", "name": "User",
         "fields": [{"name": "id", "type": "long"}]}

    Keys are also available as attributes.
    """

    def __getattr__(self, item):
        try:
            return self[item]
        except KeyError:
            raise AttributeError(item)

    @classmethod
    def parse(cls, text):
        """Make a Schema from its JSON text

        A bare type name, like ``"int"``, is taken to mean ``{"type": "int"}``.
        """
        if isinstance(text, bytes):
            text = text.decode("utf-8")
        try:
            data = json.loads(text)
        except ValueError as e:
            raise InvalidArgumentError("Schema is not valid JSON: %s" % e) from e
        if isinstance(data, str):
            data = {"type": data}
        if not isinstance(data, dict) or "type" not in data:
            raise InvalidArgumentError("Schema must be a JSON object with a 'type', got %r" % (data,))
        return cls(data)

    def to_canonical_text(self, pretty=True):
        """Deterministic JSON text, readable by ``Schema.parse``"""
        if pretty:
            return json.dumps(self, indent=2, ensure_ascii=False)
        return json.dumps(self, separators=(",", ":"), ensure_ascii=False)

    @property
    def fields(self):
        """Names of the fields of a record schema"""
        return [f["name"] for f in self.get("fields", [])]

    def __repr__(self):
        return "<Schema %s>" % self.to_canonical_text(pretty=False)
