# -----------------------------------------------------------------------------
# Copyright (c) 2012 - 2018, Anaconda, Inc. and dsmeta contributors
# All rights reserved.
#
# The full license is in the LICENSE file, distributed with this software.
# -----------------------------------------------------------------------------

import os
import uuid

import fsspec
import pytest
from fsspec.implementations.local import make_path_posix

from dsmeta import config


@pytest.fixture(scope="session")
def memory_fs():
    """The in-memory filesystem shared by the whole run

    Emptied at the end of the session, however the tests went.
    """
    fs = fsspec.filesystem("memory")
    try:
        yield fs
    finally:
        fs.store.clear()
        fs.pseudo_dirs[:] = [""]


@pytest.fixture
def memory_root(memory_fs):
    root = "/" + uuid.uuid4().hex
    try:
        yield "memory://" + root
    finally:
        if memory_fs.exists(root):
            memory_fs.rm(root, recursive=True)


@pytest.fixture
def local_root(tmp_path):
    return make_path_posix(str(tmp_path / "datasets"))


@pytest.fixture(params=["local", "memory"])
def root(request):
    """Root URI on each kind of filesystem"""
    return request.getfixturevalue(request.param + "_root")


@pytest.fixture
def tmp_config_path(tmp_path):
    key = "DSMETA_CONF_FILE"
    original = os.getenv(key)
    temp_config_path = make_path_posix(os.path.join(tmp_path, "test_config.yml"))
    os.environ[key] = temp_config_path
    assert config.cfile() == temp_config_path
    yield temp_config_path
    if original:
        os.environ[key] = original
    else:
        del os.environ[key]
    config.conf.reload_all()
    assert config.cfile() != temp_config_path
