#!/usr/bin/env python3
"""
Facsculator
A complex-number calculator core: immutable complex arithmetic and an expression tokenizer.
"""

from setuptools import setup, find_packages
import os
import re
import sys

# Ensure Python 3.8+
if sys.version_info < (3, 8):
    raise RuntimeError("Facsculator requires Python 3.8 or later")

# Read version from __init__.py without importing the package
here = os.path.abspath(os.path.dirname(__file__))
version_file = os.path.join(here, "facsculator", "__init__.py")
version = "0.1.0-alpha"
if os.path.exists(version_file):
    with open(version_file, encoding="utf-8") as f:
        match = re.search(r'^__version__\s*=\s*"([^"]+)"', f.read(), re.MULTILINE)
    if match:
        version = match.group(1)

# Read README
readme_file = os.path.join(here, "README.md")
long_description = ""
if os.path.exists(readme_file):
    with open(readme_file, "r", encoding="utf-8") as f:
        long_description = f.read()

setup(
    name="facsculator",
    version=version,
    description="Complex-number arithmetic and a tokenizer for complex expressions",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="xwest",
    author_email="dev@facsculator.org",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        # Core has no external dependencies
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "black>=23.3.0",
            "flake8>=6.0.0",
            "mypy>=1.4.0",
            "isort>=5.12.0",
        ],
        "scientific": [
            "numpy>=1.24.0",
        ],
        "test": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "numpy>=1.24.0",
        ],
        "all": [
            "pytest>=7.4.0", "pytest-cov>=4.1.0",
            "black>=23.3.0", "flake8>=6.0.0", "mypy>=1.4.0", "isort>=5.12.0",
            "numpy>=1.24.0",
        ],
    },
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    keywords=[
        "complex-numbers", "calculator", "lexer", "tokenizer",
        "mathematical-computing"
    ],
    zip_safe=False,
    platforms=["Windows", "Linux", "macOS"],
)
