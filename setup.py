#!/usr/bin/env python3
from setuptools import setup, find_packages

setup(
    name="treewm",
    version="0.1.0",
    description="Tree-based dynamic tiling layout engine for Python window managers",
    license="ISC",
    packages=find_packages(include=["treewm", "treewm.*"]),
    python_requires=">=3.8",
    install_requires=["pypubsub"],
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: ISC License (ISCL)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Desktop Environment :: Window Managers",
    ],
)
