#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

CLASSDIFF_PATH = HERE / "classdiff"


def get_version(fpath):
    with open(fpath) as f:
        match = re.search(r'^__version__ = "([^"]+)"', f.read(), re.M)
    return match.group(1)


VERSION = get_version(CLASSDIFF_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name="classdiff",
      version=VERSION,
      description="Class-aware structural diff of theme configuration trees",
      long_description=LONG_DESCRIPTION,
      long_description_content_type="text/markdown",
      license="BSD",
      python_requires=">=3.8",
      packages=find_packages(include=["classdiff", "classdiff.*"]),
      package_data={"classdiff.tests": ["files/*.json"]},
      install_requires=[
          "colorama>=0.4.6",
          "jupyter_core",
          "traitlets>=5",
      ],
      extras_require={
          "test": [
              "pytest>=6.0",
          ],
      },
      entry_points={
          "console_scripts": [
              "classdiff = classdiff.classdiffapp:main",
          ],
      },
      classifiers=[
          "License :: OSI Approved :: BSD License",
          "Programming Language :: Python :: 3",
      ],
    )
