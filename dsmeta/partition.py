# -----------------------------------------------------------------------------
# Copyright (c) 2012 - 2018, Anaconda, Inc. and dsmeta contributors
# All rights reserved.
#
# The full license is in the LICENSE file, distributed with this software.
# -----------------------------------------------------------------------------
"""
Partition strategies and their textual expressions.

An expression is a list of field partitioner calls::

    [hash("user_id", "user_hash", 16), identity("month", "month", 12)]

Only the partitioners registered here may appear, and their arguments must
be literals; nothing in an expression is ever executed.
"""

import ast
from functools import reduce

from .exceptions import InvalidArgumentError


class FieldPartitioner(object):
    """Derives one partition field from one source field of a record"""

    kind = None

    def __init__(self, source, name=None):
        self.source = source
        self.name = name or source

    @property
    def cardinality(self):
        return None

    def arguments(self):
        return [self.source, self.name]

    def to_expression(self):
        return "%s(%s)" % (self.kind, ", ".join(_literal(a) for a in self.arguments()))

    def __eq__(self, other):
        return type(self) is type(other) and self.arguments() == other.arguments()

    def __hash__(self):
        return hash((self.kind, tuple(self.arguments())))

    def __repr__(self):
        return "<%s %s>" % (self.__class__.__name__, self.to_expression())


class HashFieldPartitioner(FieldPartitioner):
    """Buckets the source value by hash"""

    kind = "hash"

    def __init__(self, source, name=None, buckets=None):
        if isinstance(name, int) and buckets is None:
            name, buckets = None, name
        if not isinstance(buckets, int) or buckets < 1:
            raise InvalidArgumentError("hash partitioner needs a positive number of buckets, got %r" % (buckets,))
        super().__init__(source, name)
        self.buckets = buckets

    @property
    def cardinality(self):
        return self.buckets

    def arguments(self):
        return [self.source, self.name, self.buckets]


class IdentityFieldPartitioner(FieldPartitioner):
    """Uses the source value itself"""

    kind = "identity"

    def __init__(self, source, name=None, cardinality=None):
        if isinstance(name, int) and cardinality is None:
            name, cardinality = None, name
        if cardinality is not None and (not isinstance(cardinality, int) or cardinality < 1):
            raise InvalidArgumentError("identity partitioner cardinality must be a positive int, got %r" % (cardinality,))
        super().__init__(source, name)
        self._cardinality = cardinality

    @property
    def cardinality(self):
        return self._cardinality

    def arguments(self):
        args = [self.source, self.name]
        if self._cardinality is not None:
            args.append(self._cardinality)
        return args


class RangeFieldPartitioner(FieldPartitioner):
    """Assigns the source value to the first range whose upper bound it
    does not exceed"""

    kind = "range"

    def __init__(self, source, name=None, *upper_bounds):
        if not upper_bounds:
            raise InvalidArgumentError("range partitioner needs at least one upper bound")
        if list(upper_bounds) != sorted(upper_bounds):
            raise InvalidArgumentError("range partitioner bounds must be sorted: %r" % (upper_bounds,))
        super().__init__(source, name)
        self.upper_bounds = list(upper_bounds)

    @property
    def cardinality(self):
        return len(self.upper_bounds)

    def arguments(self):
        return [self.source, self.name] + self.upper_bounds


partitioners = {
    cls.kind: cls
    for cls in (HashFieldPartitioner, IdentityFieldPartitioner, RangeFieldPartitioner)
}


def _literal(value):
    if isinstance(value, str):
        # double quotes, for symmetry with common expression languages
        return '"%s"' % value.replace("\\", "\\\\").replace('"', '\\"')
    return repr(value)


class PartitionStrategy(object):
    """Ordered collection of field partitioners

    Parameters
    ----------
    field_partitioners: list of FieldPartitioner
    """

    def __init__(self, field_partitioners):
        field_partitioners = list(field_partitioners)
        if not field_partitioners:
            raise InvalidArgumentError("A partition strategy needs at least one field partitioner")
        names = [fp.name for fp in field_partitioners]
        if len(set(names)) != len(names):
            raise InvalidArgumentError("Duplicate partition field names: %s" % names)
        self.field_partitioners = field_partitioners

    @classmethod
    def parse(cls, expression):
        """Build a strategy from its expression text"""
        try:
            tree = ast.parse(expression.strip(), mode="eval").body
        except (SyntaxError, AttributeError) as e:
            raise InvalidArgumentError("Cannot parse partition expression %r" % (expression,)) from e
        calls = tree.elts if isinstance(tree, (ast.List, ast.Tuple)) else [tree]
        return cls([_partitioner_from_call(call, expression) for call in calls])

    def to_expression(self):
        return "[%s]" % ", ".join(fp.to_expression() for fp in self.field_partitioners)

    @property
    def cardinality(self):
        """Maximum number of partitions, or None when unbounded"""
        cards = [fp.cardinality for fp in self.field_partitioners]
        if any(c is None for c in cards):
            return None
        return reduce(lambda a, b: a * b, cards, 1)

    def __eq__(self, other):
        return isinstance(other, PartitionStrategy) and self.field_partitioners == other.field_partitioners

    def __hash__(self):
        return hash(tuple(self.field_partitioners))

    def __repr__(self):
        return "<PartitionStrategy %s>" % self.to_expression()


def _partitioner_from_call(node, expression):
    if not isinstance(node, ast.Call) or not isinstance(node.func, ast.Name) or node.keywords:
        raise InvalidArgumentError("Partition expression %r must be a list of partitioner calls" % (expression,))
    kind = node.func.id
    if kind not in partitioners:
        raise InvalidArgumentError("Unknown partitioner %r in %r" % (kind, expression))
    try:
        args = [ast.literal_eval(a) for a in node.args]
    except ValueError as e:
        raise InvalidArgumentError("Partitioner arguments must be literals in %r" % (expression,)) from e
    try:
        return partitioners[kind](*args)
    except TypeError as e:
        raise InvalidArgumentError("Bad arguments for %s in %r: %s" % (kind, expression, e)) from e
