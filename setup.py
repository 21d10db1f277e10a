#!/usr/bin/env python

from setuptools import setup, find_packages


with open("VERSION") as version_fp:
    VERSION = version_fp.read().strip()

setup(
    name="tornadolb",
    version=VERSION,
    description="Tornado client for Rackspace Cloud Load Balancers",
    license="http://www.apache.org/licenses/LICENSE-2.0",
    packages=find_packages(exclude=["tests", "tests.*", "dist"]),
    install_requires=["tornado", "python-dateutil"],
    extras_require={"test": ["pytest", "mock", "testnado"]}
)
