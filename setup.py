#!/usr/bin/env python3
"""
Setup script of linquad.
"""


from codecs import open

from setuptools import find_packages, setup

with open("README.md", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="linquad",
    version="0.2.0",
    author="Fabian Hofmann",
    author_email="hofmann@fias.uni-frankfurt.de",
    description="Symbolic affine and quadratic expressions for optimization models",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="GPLv3",
    packages=find_packages(exclude=["doc", "test"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "scipy>=1.13",
        "pandas",
        "deprecation",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-cov",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Natural Language :: English",
        "Operating System :: OS Independent",
    ],
)
