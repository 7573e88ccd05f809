#!/usr/bin/env python
import importlib.util
from pathlib import Path

from setuptools import find_namespace_packages, setup

README = Path("README.rst").read_text(encoding="utf-8")

spec = importlib.util.spec_from_file_location(
    "spikesync.version",
    "src/spikesync/version.py",
)
module = importlib.util.module_from_spec(spec)
spec.loader.exec_module(module)
VERSION = module.__version__

REQUIREMENTS = {
    "base": [
        # requirements for base functionalities
        "click>=8",
        "jsonschema>=4.0",
        "numpy>=1.19.4",
        "pandas>=1.3.0",
        "pydantic>=2",
        "pyyaml>=5.4.1",
    ],
    "tests": [
        "pytest",
    ],
}

setup(
    name="spikesync",
    version=VERSION,
    description="Van Rossum and SPIKE distances between spike trains",
    long_description=README,
    long_description_content_type="text/x-rst",
    install_requires=REQUIREMENTS["base"],
    packages=find_namespace_packages(where="src"),
    package_dir={"": "src"},
    package_data={"spikesync": ["schemas/*.yaml"]},
    include_package_data=True,
    python_requires=">=3.9",
    extras_require={
        "tests": REQUIREMENTS["tests"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "Intended Audience :: Science/Research",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
    ],
    entry_points={
        "console_scripts": [
            "spikesync=spikesync.apps.main:cli",
        ],
    },
)
