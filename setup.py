#!/usr/bin/env python3
# setup.py: installs the benchmark-git-clone command
#
# Install:
#   pip install -e .
#   pip install -e .[test]    # with test dependencies
#
# Run:
#   benchmark-git-clone [-n] <remote> <repo-info> [<repo-info> ...]

from setuptools import setup, find_packages

# Use README.md as the long description
try:
    with open("README.md", "r", encoding="utf-8") as fh:
        long_description = fh.read()
except FileNotFoundError:
    long_description = "Benchmark git clone strategies against a remote host"

setup(
    name="git-clone-bench",
    version="1.0.0",
    author="qiao-925",
    description="Benchmark git clone strategies against a remote host",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages("src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "colorama>=0.4.6",  # Windows console colors, report escape stripping
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "benchmark-git-clone=git_clone_bench.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Version Control :: Git",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
