#!/usr/bin/env python3
"""
Packaging for the ZBR disk access-time model.

Supports standard pip installs, including editable installs (pip install -e .).
"""

from setuptools import setup, find_packages

setup(
    name="zbr-disk-model",
    version="0.1.0",
    description="Access-time model of a zoned-bit-recording hard disk for performance simulators",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.5.0",
        "rich>=13.7.0",
        "numpy>=1.26.0",
    ],
    extras_require={
        "test": ["pytest>=7.4.0"],
    },
)
