#!/usr/bin/env python3

"""Setup script for PDB coordinate extraction and normalization package."""

from setuptools import setup, find_packages

setup(
    name="pdbnorm",
    version="0.1.0",
    description="Render-ready atom coordinates from PDB structure files",
    author="Adam",
    author_email="adam@example.com",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "numpy>=1.20.0",
        "requests>=2.25.0",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "biopython>=1.79",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "normalize-structures=pdbnorm.presentation.cli.normalize_structures:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Chemistry",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
