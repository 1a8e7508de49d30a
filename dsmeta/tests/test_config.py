# -----------------------------------------------------------------------------
# Copyright (c) 2012 - 2018, Anaconda, Inc. and dsmeta contributors
# All rights reserved.
#
# The full license is in the LICENSE file, distributed with this software.
# -----------------------------------------------------------------------------

import os

import pytest
import yaml

from dsmeta import config
from dsmeta.config import Config, defaults
from dsmeta.util_tests import temp_conf


@pytest.mark.parametrize("conf", [{}, {"default_format": "parquet"}, {"other": True}])
def test_load_conf(conf, monkeypatch):
    for k in list(os.environ):
        if k.startswith("DSMETA_"):
            monkeypatch.delenv(k)
    inconf = defaults.copy()
    expected = inconf.copy()
    with temp_conf(conf) as fn:
        config = Config(fn)
        config.load(fn)
        expected.update(conf)
        assert dict(config) == expected
        config.reset()
        assert dict(config) == inconf


def test_load_env(monkeypatch):
    monkeypatch.setenv("DSMETA_STORAGE_OPTIONS", "{'anon': True}")
    monkeypatch.setenv("DSMETA_ROOT", "memory://from-env")  # not a literal
    with temp_conf({"root": "memory://from-file"}) as fn:
        conf = Config(fn)
    assert conf["storage_options"] == {"anon": True}
    assert conf["root"] == "memory://from-env"


def test_bad_file_is_ignored():
    with temp_conf({}) as fn:
        with open(fn, "w") as f:
            f.write("a: 1\na: 2\n")
        conf = Config(fn)
    assert conf["default_format"] == "avro"


def test_set_context():
    with temp_conf({}) as fn:
        conf = Config(fn)
    with conf.set(default_format="csv", logging="DEBUG"):
        assert conf["default_format"] == "csv"
        assert config.logger.level == 10
    assert conf["default_format"] == defaults["default_format"]
    conf.set({"provider": "memory"})
    assert conf["provider"] == "memory"
    assert conf.get("missing", 5) == 5
    with pytest.raises(KeyError):
        conf["missing"]


def test_save(tmp_config_path):
    conf = Config()
    assert conf.filename == tmp_config_path
    conf["default_format"] = "parquet"
    conf.save()
    with open(tmp_config_path) as f:
        assert yaml.safe_load(f)["default_format"] == "parquet"
    assert Config()["default_format"] == "parquet"
