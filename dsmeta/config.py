"""dsmeta config manipulations and persistence"""

# -----------------------------------------------------------------------------
# Copyright (c) 2012 - 2018, Anaconda, Inc. and dsmeta contributors
# All rights reserved.
#
# The full license is in the LICENSE file, distributed with this software.
# -----------------------------------------------------------------------------

import ast
import contextlib
import copy
import logging
import os
import posixpath
from os.path import expanduser

import appdirs
import yaml
from fsspec.implementations.local import make_path_posix

from dsmeta.utils import yaml_load

logger = logging.getLogger("dsmeta")

confdir = make_path_posix(os.getenv("DSMETA_CONF_DIR", os.path.join(expanduser("~"), ".dsmeta")))


def default_root():
    return make_path_posix(posixpath.join(appdirs.user_data_dir(appname="dsmeta", appauthor="dsmeta"), "datasets"))


defaults = {
    "logging": "INFO",
    "root": default_root(),
    "provider": "filesystem",
    "default_format": "avro",
    "storage_options": {},
}


def cfile():
    return make_path_posix(os.getenv("DSMETA_CONF_FILE", posixpath.join(confdir, "conf.yaml")))


class Config(dict):
    """dsmeta's dict-like config system

    Instance ``dsmeta.config.conf`` is globally used throughout the package
    """

    def __init__(self, filename=None, **kwargs):
        self.filename = filename if filename is not None else cfile()
        self.reload_all()
        super().__init__(**kwargs)
        logger.setLevel(self["logging"])

    def reset(self):
        """Set conf values back to defaults"""
        self.clear()
        self.update(copy.deepcopy(defaults))

    def save(self, fn=None):
        """Save current configuration to file as YAML

        Uses ``self.filename`` for target location
        """
        fn = fn or self.filename
        if fn is False:
            return
        os.makedirs(os.path.dirname(fn) or ".", exist_ok=True)
        with open(fn, "w") as f:
            yaml.dump(dict(self), f)

    @contextlib.contextmanager
    def _unset(self, temp):
        yield
        self.clear()
        self.update(temp)
        logger.setLevel(self["logging"])

    def set(self, update_dict=None, **kw):
        """Change config values within a context or for the session

        Examples
        --------

        Value resets after context ends

        >>> with dsmeta.config.conf.set(default_format="parquet"):
        ...     ...

        Set for whole session

        >>> dsmeta.config.conf.set(default_format="parquet")
        """
        temp = copy.deepcopy(dict(self))
        if update_dict:
            kw.update(update_dict)
        self.update(kw)
        if "logging" in kw:
            logger.setLevel(self["logging"])
        return self._unset(temp)

    def __getitem__(self, item):
        if item in self:
            return super().__getitem__(item)
        elif item in defaults:
            return defaults[item]
        else:
            raise KeyError(item)

    def get(self, key, default=None):
        if key in self:
            return super().__getitem__(key)
        return default

    def reload_all(self):
        self.reset()
        self.load()
        self.load_env()

    def load(self, fn=None):
        """Update global config from YAML file

        If fn is None, looks in global config directory, which is either defined
        by the DSMETA_CONF_DIR env-var or is ~/.dsmeta/ .
        """
        fn = fn or self.filename

        if os.path.isfile(fn):
            with open(fn) as f:
                try:
                    self.update(yaml_load(f) or {})
                except Exception as e:
                    logger.warning('Failure to load config file "{fn}": {e}'.format(fn=fn, e=e))

    def load_env(self):
        """Analyse environment variables and update conf accordingly"""
        # environment variables take precedence over conf file
        for k, v in os.environ.items():
            if k.startswith("DSMETA_") and k not in ("DSMETA_CONF_DIR", "DSMETA_CONF_FILE"):
                k2 = k[7:].lower()
                try:
                    val = ast.literal_eval(v)
                except (ValueError, SyntaxError):
                    val = v
                self[k2] = val


conf = Config()
