#!/usr/bin/env python

import os
from setuptools import setup

def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


setup(
    name='graphroute',
    version='0.1.0',
    description='Serve GraphQL schemas from Flask routes, with SQLAlchemy relationship fields',
    long_description=read("README.rst"),
    packages=['graphroute'],
    keywords="graphql flask sqlalchemy",
    install_requires=[
        "flask>=2.2",
        "graphql-core>=3.2,<3.3",
        "sqlalchemy>=1.4",
    ],
    extras_require={
        "tests": [
            "precisely>=0.1.9",
            "pytest",
        ],
    },
    python_requires=">=3.8",
    license="BSD-2-Clause",
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Framework :: Flask',
    ],
)
