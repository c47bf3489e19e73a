# -*- coding: utf-8; -*-

import io
import os

from setuptools import setup


metadata = {}
with io.open(os.path.join('httpdecompress', '__metadata__.py'), 'rb') as f:
    exec(f.read(), metadata)            # pylint: disable=exec-used

with io.open('README.rst') as f:
    long_description = f.read()

setup(
    name='httpdecompress',
    version=metadata['version'],
    description='Content-Encoding aware decoding of HTTP response bodies',
    long_description=long_description,
    license='MIT',

    install_requires=[
        'Brotli >= 1.2.0',
        'pyzstd >= 0.15.9',
        'python-snappy >= 0.6.0',
        'lz4 >= 3.1.0',
    ],
    extras_require={
        'test': [
            'pytest >= 6.0',
        ],
    },

    packages=[
        'httpdecompress',
        'httpdecompress.known',
        'httpdecompress.util',
    ],
    python_requires='>= 3.7',
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: System :: Archiving :: Compression',
    ],
    keywords='HTTP Content-Encoding gzip brotli zstd snappy lz4 decompression',
)
