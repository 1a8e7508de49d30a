# -----------------------------------------------------------------------------
# Copyright (c) 2012 - 2018, Anaconda, Inc. and dsmeta contributors
# All rights reserved.
#
# The full license is in the LICENSE file, distributed with this software.
# -----------------------------------------------------------------------------

import pytest

from dsmeta.exceptions import InvalidArgumentError
from dsmeta.partition import (HashFieldPartitioner, IdentityFieldPartitioner,
                              PartitionStrategy, RangeFieldPartitioner)


def test_parse():
    ps = PartitionStrategy.parse(
        '[hash("username", "username_hash", 16), identity("month", "month", 12), '
        'range("name", "name_range", "g", "n", "z")]')
    h, i, r = ps.field_partitioners
    assert h == HashFieldPartitioner("username", "username_hash", 16)
    assert i == IdentityFieldPartitioner("month", "month", 12)
    assert r == RangeFieldPartitioner("name", "name_range", "g", "n", "z")
    assert ps.cardinality == 16 * 12 * 3


def test_single_call_and_defaults():
    ps = PartitionStrategy.parse('hash("id", 4)')
    assert ps.field_partitioners == [HashFieldPartitioner("id", "id", 4)]
    assert ps.to_expression() == '[hash("id", "id", 4)]'


def test_expression_reparses():
    ps = PartitionStrategy([
        HashFieldPartitioner("user id", "h", 2),
        IdentityFieldPartitioner("quote\"d", "q"),
        RangeFieldPartitioner("n", "n_range", 10, 100),
    ])
    assert PartitionStrategy.parse(ps.to_expression()) == ps
    assert ps.cardinality is None


@pytest.mark.parametrize("expr", [
    "",
    "[",
    "[]",
    "[hash]",
    '[bogus("a", 1)]',
    '[hash("a", "b", n)]',
    '[hash("a", buckets=2)]',
    '[os.system("ls")]',
    '[hash("a", "b", 0)]',
    '[hash("a", "b")]',
    '[range("a", "b")]',
    '[range("a", "b", 3, 1)]',
    '[identity("a", "x"), identity("b", "x")]',
    '[identity("a", "b", 1, 2, 3)]',
])
def test_invalid(expr):
    with pytest.raises(InvalidArgumentError):
        PartitionStrategy.parse(expr)


def test_equality():
    a = PartitionStrategy.parse('[hash("id", "h", 4)]')
    b = PartitionStrategy.parse('[ hash( "id" , "h" , 4 ) ]')
    assert a == b
    assert hash(a) == hash(b)
    assert a != PartitionStrategy.parse('[hash("id", "h", 8)]')
    assert a != "[hash(\"id\", \"h\", 4)]"
