#-----------------------------------------------------------------------------
# Copyright (c) 2012 - 2018, Anaconda, Inc. and dsmeta contributors
# All rights reserved.
#
# The full license is in the LICENSE file, distributed with this software.
#-----------------------------------------------------------------------------
import logging

import pytest
import yaml

from dsmeta.utils import closing_guarded, join_path, make_path_posix, yaml_load


def test_windows_file_path():
    path = 'C:\\Users\\user\\fake.file'
    actual = make_path_posix(path)
    expected = 'C:/Users/user/fake.file'
    assert actual == expected


def test_make_path_posix_removes_double_sep():
    path = 'user//fake.file'
    actual = make_path_posix(path)
    expected = 'user/fake.file'
    assert actual == expected


@pytest.mark.parametrize('path', [
    '~/fake.file',
    'https://example.com',
])
def test_noops(path):
    """For non windows style paths, make_path_posix should be a noop"""
    assert make_path_posix(path) == path


@pytest.mark.parametrize('root,parts,expected', [
    ('/data', ['a', 'b'], '/data/a/b'),
    ('/data/', ['a'], '/data/a'),
    ('/', ['a'], '/a'),
    ('', ['a'], '/a'),
    ('bucket/prefix', ['a'], 'bucket/prefix/a'),
])
def test_join_path(root, parts, expected):
    assert join_path(root, *parts) == expected


def test_yaml_duplicates():
    assert yaml_load("a: 1\nb: 2\n") == {"a": 1, "b": 2}
    with pytest.raises(yaml.constructor.ConstructorError):
        yaml_load("a: 1\na: 2\n")
    # the strict constructor does not leak out of yaml_load
    assert yaml.safe_load("a: 1\na: 2\n") == {"a": 2}


class Closeable(object):
    def __init__(self, fail=False):
        self.fail = fail
        self.closed = 0

    def close(self):
        self.closed += 1
        if self.fail:
            raise OSError("close failed")


def test_closing_guarded_closes():
    f = Closeable()
    with closing_guarded(f) as g:
        assert g is f
    assert f.closed == 1


def test_closing_guarded_raises_close_error():
    f = Closeable(fail=True)
    with pytest.raises(OSError, match="close failed"):
        with closing_guarded(f):
            pass


def test_closing_guarded_keeps_original(caplog):
    f = Closeable(fail=True)
    with caplog.at_level(logging.WARNING, logger="dsmeta"):
        with pytest.raises(KeyError):
            with closing_guarded(f):
                raise KeyError("original")
    assert f.closed == 1
    assert "close failed" in caplog.text
