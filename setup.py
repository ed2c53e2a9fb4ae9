# Copyright (c) WePOS
# MIT License. See LICENSE file for details.

from setuptools import setup, find_packages

with open("requirements.txt") as f:
    install_requires = f.read().strip().split("\n")

# get version from __version__ variable in wepos/__init__.py
from wepos import __version__ as version

setup(
    name="wepos",
    version=version,
    description="Standalone point of sale frontend for ERPNext",
    author="WePOS",
    author_email="support@wepos.dev",
    packages=find_packages(exclude=["tests", "tests.*"]),
    zip_safe=False,
    include_package_data=True,
    install_requires=install_requires,
    extras_require={
        "test": ["pytest"],
    },
    license="MIT",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.10",
    ],
)
