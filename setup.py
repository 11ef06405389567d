#!/usr/bin/env python
# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import re
import typing as tp
from pathlib import Path
from setuptools import setup
from setuptools import find_packages


# read requirements

requirements: tp.Dict[str, tp.List[str]] = {}
for extra in ["dev", "main"]:
    requirements[extra] = [
        line for line in Path(f"requirements/{extra}.txt").read_text().splitlines() if line.strip()
    ]


# build long description

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()


# find version

init_str = Path("paramswarm/__init__.py").read_text()
match = re.search(r"^__version__ = \"(?P<version>[\w\.]+?)\"$", init_str, re.MULTILINE)
assert match is not None, "Could not find version in paramswarm/__init__.py"
version = match.group("version")


# setup
setup(
    name="paramswarm",
    version=version,
    license="MIT",
    description="Self-adapting control parameters for particle swarm optimization",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["paramswarm", "paramswarm.*"]),
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering",
        "Programming Language :: Python",
    ],
    install_requires=requirements["main"],
    extras_require={
        "all": requirements["dev"],
        "dev": requirements["dev"],
    },
    package_data={"paramswarm": ["py.typed"]},
    python_requires=">=3.6",
)
