#!/usr/bin/env python

import os
from setuptools import setup

def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


setup(
    name='graphcompose',
    version='0.1.0',
    description='Generate GraphQL CRUD resolvers from SQLAlchemy models',
    long_description=read("README.rst"),
    packages=['graphcompose', 'graphcompose.resolvers'],
    keywords="graphql sqlalchemy crud resolver mutation",
    install_requires=[
        "graphql-core>=3.2,<3.3",
        "SQLAlchemy[asyncio]>=2.0",
    ],
    extras_require={
        "test": [
            "aiosqlite>=0.19",
            "precisely>=0.1.9",
            "pytest>=7",
            "pytest-asyncio>=0.21",
        ],
    },
    python_requires=">=3.8",
    license="BSD-2-Clause",
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
)
