#!/usr/bin/env python
#-----------------------------------------------------------------------------
# Copyright (c) 2012 - 2018, Anaconda, Inc. and dsmeta contributors
# All rights reserved.
#
# The full license is in the LICENSE file, distributed with this software.
#-----------------------------------------------------------------------------

from setuptools import setup, find_packages

requires = [line.strip() for line in open('requirements.txt').readlines()
            if line.strip() and not line.startswith("#")]
extras_require = {
  'test': ['pytest'],
}
extras_require['complete'] = sorted(set(sum(extras_require.values(), [])))

setup(
    name='dsmeta',
    version='0.1.0',
    description='Dataset descriptor store on fsspec filesystems',
    license='BSD',
    include_package_data=True,
    install_requires=requires,
    packages=find_packages(),
    entry_points={
        'console_scripts': [
            'dsmeta = dsmeta.cli.__main__:main',
        ],
        'dsmeta.providers': [
            'filesystem = dsmeta.providers.filesystem:FileSystemMetadataProvider',
            'memory = dsmeta.providers.memory:MemoryMetadataProvider',
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.8",
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    tests_require=['pytest'],
    extras_require=extras_require,
    zip_safe=False,
)
