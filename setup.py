#  -*- coding: utf-8 -*-
"""
Setuptools script for the uPnPDevice project.
"""

import os
from textwrap import fill, dedent

from setuptools import setup, find_packages


def required(fname):
    return [
        line.strip() for line in open(
            os.path.join(
                os.path.dirname(__file__), fname
            )
        ).read().split('\n') if line.strip()
    ]


setup(
    name="uPnPDevice",
    version="0.1.0",
    packages=find_packages(
        exclude=[
            "*.tests",
            "*.tests.*",
            "tests.*",
            "tests",
            "*.examples",
            "*.examples.*",
            "examples.*",
            "examples"
        ]
    ),
    scripts=[],
    include_package_data=True,
    extras_require={
        'test': ['pytest', 'mock'],
    },
    install_requires=required('requirements.txt'),
    python_requires='>=3.6',
    zip_safe=False,
    # Metadata for upload to PyPI
    description=fill(dedent("""\
        Python 3 library for reading UPnP device descriptions into a device tree.
    """)),
    classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Communications",
        "Topic :: Home Automation",
        "Topic :: System :: Networking"
    ],
    license="MIT",
    keywords="upnp",
)
