#!/usr/bin/env python

#
# Copyright (c) 2013, Digium, Inc.
#

import os

from setuptools import setup

setup(
    name="ari-rest",
    version="0.1.0",
    license="BSD 3-Clause License",
    description="Thin client for the Asterisk REST Interface",
    long_description=open(os.path.join(os.path.dirname(__file__),
                                       "README.rst")).read(),
    author="Digium, Inc.",
    author_email="dlee@digium.com",
    url="https://github.com/asterisk/asterisk_rest_libraries",
    packages=["ari_rest"],
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Communications :: Telephony",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires='>=3.11',
    install_requires=[
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "requests>=2.31.0",
    ],
    extras_require={
        "test": [
            "coverage>=7.9.1",
            "pytest",
            "responses>=0.25.7",
        ],
    },
)
