# -----------------------------------------------------------------------------
# Copyright (c) 2012 - 2018, Anaconda, Inc. and dsmeta contributors
# All rights reserved.
#
# The full license is in the LICENSE file, distributed with this software.
# -----------------------------------------------------------------------------
"""
Dataset metadata kept beside the data, on any fsspec filesystem.

Each dataset ``name`` lives in the directory ``<root>/<name with "." as
"/">``, and its metadata in the hidden ``.metadata`` directory inside that::

    <root>/group/logs/.metadata/schema.avsc
    <root>/group/logs/.metadata/descriptor.properties

The presence of ``.metadata`` is what makes a directory a dataset.
"""

import logging
import posixpath

from fsspec.core import url_to_fs

from .. import properties
from ..descriptor import FILE_SYSTEM_URI_PROPERTY, DatasetDescriptor
from ..exceptions import (DatasetExistsError, InvalidArgumentError, MetadataAccessError,
                          NoSuchDatasetError)
from ..utils import closing_guarded, join_path, make_path_posix
from .base import MetadataProvider, check_argument

logger = logging.getLogger("dsmeta")

METADATA_DIRECTORY = ".metadata"
SCHEMA_FILE_NAME = "schema.avsc"
DESCRIPTOR_FILE_NAME = "descriptor.properties"
NAMESPACE_DELIMITER = "."

VERSION_FIELD_NAME = "version"
METADATA_VERSION = "1"
FORMAT_FIELD_NAME = "format"
LOCATION_FIELD_NAME = "location"
PARTITION_EXPRESSION_FIELD_NAME = "partitionExpression"
RESERVED_FIELD_NAMES = (VERSION_FIELD_NAME, FORMAT_FIELD_NAME, LOCATION_FIELD_NAME,
                        PARTITION_EXPRESSION_FIELD_NAME)


def filesystem_uri(fs):
    """URI of a filesystem's root, like ``file:///`` or ``memory:///``"""
    protocol = fs.protocol if isinstance(fs.protocol, str) else fs.protocol[0]
    return "%s://%s" % (protocol, fs.root_marker)


def metadata_path(dataset_path):
    return posixpath.join(dataset_path, METADATA_DIRECTORY)


def _hidden(basename):
    return basename.startswith((".", "_"))


class FileSystemMetadataProvider(MetadataProvider):
    """Stores descriptors in files under a root directory

    Parameters
    ----------
    root: str
        Directory or URL (e.g., ``hdfs://namenode/datasets``) under which
        datasets are kept. Its filesystem is resolved once, here, and used for
        every operation.
    storage_options:
        Passed to fsspec to instantiate the filesystem, and again whenever a
        descriptor's location must be resolved.
    """

    name = "filesystem"

    def __init__(self, root, **storage_options):
        check_argument(root, "Root")
        self.storage_options = storage_options
        try:
            self.fs, path = url_to_fs(make_path_posix(str(root)), **storage_options)
        except (ValueError, ImportError, OSError) as e:
            raise MetadataAccessError("Cannot get filesystem for root path: %s" % root,
                                      path=root) from e
        self.root = path or self.fs.root_marker

    @property
    def root_uri(self):
        return self._qualify(self.root)

    def load(self, name):
        check_argument(name, "Name")
        logger.debug("Loading dataset metadata name:%s", name)

        dataset_path = self._path_for_dataset(name)
        meta_path = metadata_path(dataset_path)
        self._check_exists(meta_path, name)

        descriptor_path = posixpath.join(meta_path, DESCRIPTOR_FILE_NAME)
        try:
            with closing_guarded(self.fs.open(descriptor_path, mode="rb")) as f:
                props = properties.load(f)
        except (OSError, ValueError) as e:
            raise MetadataAccessError(
                "Unable to load descriptor file:%s for dataset:%s" % (descriptor_path, name),
                name=name, path=descriptor_path) from e

        version = props.pop(VERSION_FIELD_NAME, None)
        if version is not None and version != METADATA_VERSION:
            logger.warning("Dataset %s has metadata version %s, expected %s",
                           name, version, METADATA_VERSION)
        fmt = props.pop(FORMAT_FIELD_NAME, None)
        expression = props.pop(PARTITION_EXPRESSION_FIELD_NAME, None)
        # older layouts recorded neither the location nor the filesystem
        location = props.pop(LOCATION_FIELD_NAME, None) or self._qualify(dataset_path)
        if FILE_SYSTEM_URI_PROPERTY not in props:
            props[FILE_SYSTEM_URI_PROPERTY] = filesystem_uri(self._resolve(location)[0])

        schema_uri = self._qualify(posixpath.join(meta_path, SCHEMA_FILE_NAME))
        try:
            return DatasetDescriptor(
                schema=schema_uri,
                format=fmt,
                partition_strategy=expression,
                location=location,
                properties=props,
                storage_options=self.storage_options,
            )
        except InvalidArgumentError as e:
            raise MetadataAccessError(
                "Unable to parse descriptor file:%s for dataset:%s" % (descriptor_path, name),
                name=name, path=descriptor_path) from e

    def create(self, name, descriptor):
        check_argument(name, "Name")
        check_argument(descriptor, "Descriptor")
        logger.debug("Saving dataset metadata name:%s descriptor:%s", name, descriptor)

        data_path = self._data_location(name, descriptor)
        meta_path = metadata_path(data_path)

        new_descriptor = descriptor.copy(location=self._qualify(data_path)).with_property(
            FILE_SYSTEM_URI_PROPERTY, filesystem_uri(self.fs))

        try:
            if self.fs.exists(meta_path):
                raise DatasetExistsError(
                    "Descriptor directory:%s already exists" % meta_path, name=name)
            # claims the name; the files are written by the same protocol as update
            self.fs.makedirs(meta_path, exist_ok=False)
        except FileExistsError as e:
            raise DatasetExistsError(
                "Descriptor directory:%s already exists" % meta_path, name=name) from e
        except OSError as e:
            raise MetadataAccessError(
                "Unable to create metadata directory:%s for dataset:%s" % (meta_path, name),
                name=name, path=meta_path) from e

        self._write_descriptor(meta_path, name, new_descriptor)
        return new_descriptor

    def update(self, name, descriptor):
        check_argument(name, "Name")
        check_argument(descriptor, "Descriptor")
        logger.debug("Saving dataset metadata name:%s descriptor:%s", name, descriptor)

        data_path = self._data_location(name, descriptor)
        self._write_descriptor(metadata_path(data_path), name, descriptor)
        return descriptor

    def delete(self, name):
        check_argument(name, "Name")
        logger.debug("Deleting dataset metadata name:%s", name)

        dataset_path = self._path_for_dataset(name)
        meta_path = metadata_path(dataset_path)
        try:
            if not self.fs.exists(meta_path):
                return False
            self.fs.rm(meta_path, recursive=True)
            if self.fs.exists(meta_path):
                raise OSError("Failed to delete metadata directory:%s" % meta_path)
        except OSError as e:
            raise MetadataAccessError(
                "Unable to find or delete metadata directory:%s for dataset:%s" % (meta_path, name),
                name=name, path=meta_path) from e

        # only goes if empty; data files are left where they are
        try:
            self.fs.rmdir(dataset_path)
        except OSError as e:
            logger.debug("Kept dataset directory %s: %s", dataset_path, e)
        return True

    def exists(self, name):
        check_argument(name, "Name")
        potential_path = metadata_path(self._path_for_dataset(name))
        try:
            return self.fs.exists(potential_path)
        except OSError as e:
            raise MetadataAccessError("Could not check metadata path:%s" % potential_path,
                                      name=name, path=potential_path) from e

    def list(self):
        """Names of the datasets under the root, sorted

        The search stops at each dataset directory, so a dataset created
        inside another one (``a.b`` when ``a`` exists) is not listed, though
        it can still be loaded by name.
        """
        datasets = []
        try:
            entries = self.fs.ls(self.root, detail=True)
        except FileNotFoundError:
            # nothing has been stored yet
            return datasets
        except OSError as e:
            raise MetadataAccessError("Could not list data sets", path=self.root) from e
        try:
            self._collect(entries, [], datasets)
        except OSError as e:
            raise MetadataAccessError("Could not list data sets", path=self.root) from e
        return sorted(datasets)

    def _collect(self, entries, namespace, out):
        """Datasets are directories holding metadata; other directories are
        namespaces, and are searched in turn"""
        for entry in entries:
            path = entry["name"].rstrip("/")
            base = posixpath.basename(path)
            if entry["type"] != "directory" or _hidden(base):
                continue
            parts = namespace + [base]
            if self.fs.exists(metadata_path(path)):
                out.append(NAMESPACE_DELIMITER.join(parts))
                continue
            try:
                children = self.fs.ls(path, detail=True)
            except FileNotFoundError:
                continue
            self._collect(children, parts, out)

    def __repr__(self):
        return "<%s root=%s storage_options=%s>" % (
            self.__class__.__name__, self.root_uri, self.storage_options)

    def _qualify(self, path):
        return self.fs.unstrip_protocol(path)

    def _path_for_dataset(self, name):
        check_argument(name, "Dataset name")
        parts = name.split(NAMESPACE_DELIMITER)
        for part in parts:
            # hidden segments would never be listed
            if not part or _hidden(part) or part.startswith("/"):
                raise InvalidArgumentError("Invalid dataset name: %r" % name)
        return join_path(self.root, *parts)

    def _resolve(self, location):
        """Filesystem and stripped path of a location URI"""
        try:
            return url_to_fs(location, **self.storage_options)
        except (ValueError, ImportError, OSError) as e:
            raise MetadataAccessError("Cannot access filesystem for uri:%s" % location,
                                      path=location) from e

    def _data_location(self, name, descriptor):
        """Path of the dataset's data: the descriptor's location, if given,
        else derived from the name"""
        default_path = self._path_for_dataset(name)
        if descriptor.location is None:
            return default_path
        fs, path = self._resolve(descriptor.location)
        # only the root filesystem is supported
        if fs != self.fs:
            raise InvalidArgumentError(
                "FileSystem of %s does not match root directory %s"
                % (descriptor.location, self.root_uri))
        return path

    def _check_exists(self, meta_path, name):
        try:
            found = self.fs.exists(meta_path)
        except OSError as e:
            raise MetadataAccessError("Cannot access descriptor location:%s" % meta_path,
                                      name=name, path=meta_path) from e
        if not found:
            raise NoSuchDatasetError("Descriptor location is missing: %s" % meta_path, name=name)

    def _write_descriptor(self, meta_path, name, descriptor):
        """Write schema, then properties, into an existing metadata directory

        The two files are not replaced together: if the second write fails,
        the new schema stays beside the old properties.
        """
        self._check_exists(meta_path, name)

        schema_path = posixpath.join(meta_path, SCHEMA_FILE_NAME)
        try:
            # before opening, so a schema that cannot be read leaves the file alone
            schema_text = descriptor.schema.to_canonical_text()
        except OSError as e:
            raise MetadataAccessError(
                "Unable to read schema %s for dataset:%s" % (descriptor.schema_uri, name),
                name=name, path=descriptor.schema_uri) from e
        try:
            with closing_guarded(self.fs.open(schema_path, mode="wb")) as f:
                f.write(schema_text.encode("utf-8"))
                f.flush()
        except OSError as e:
            raise MetadataAccessError(
                "Unable to save schema file:%s for dataset:%s" % (schema_path, name),
                name=name, path=schema_path) from e

        props = {
            VERSION_FIELD_NAME: METADATA_VERSION,
            FORMAT_FIELD_NAME: descriptor.format,
        }
        if descriptor.location is not None:
            props[LOCATION_FIELD_NAME] = descriptor.location
        if descriptor.is_partitioned:
            props[PARTITION_EXPRESSION_FIELD_NAME] = descriptor.partition_strategy.to_expression()
        for key, value in descriptor.properties.items():
            if key not in RESERVED_FIELD_NAMES:
                props[key] = value

        descriptor_path = posixpath.join(meta_path, DESCRIPTOR_FILE_NAME)
        try:
            with closing_guarded(self.fs.open(descriptor_path, mode="wb")) as f:
                properties.dump(props, f, comment="Dataset descriptor for %s" % name)
                f.flush()
        except OSError as e:
            raise MetadataAccessError(
                "Unable to save descriptor file:%s for dataset:%s" % (descriptor_path, name),
                name=name, path=descriptor_path) from e
