#!/usr/bin/env python

import setuptools

setuptools.setup(
    name="chaseln",
    install_requires=[],
    extras_require={"cli": ["fire"], "test": ["fire", "pytest"]},
    version="0.1.0",
    packages=setuptools.find_packages("src"),
    package_dir={"": "src"},
    entry_points={"console_scripts": ["chaseln = chaseln.cli:main [cli]"],},
)
