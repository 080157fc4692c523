"""
Setup script for the Data Import Orchestrator

A command-line orchestrator that runs one or more data import jobs against an
import engine and reports a single aggregated outcome.
"""

from setuptools import setup, find_packages
import pathlib

here = pathlib.Path(__file__).parent.resolve()

# Get the long description from the README file
try:
    long_description = (here / "README.md").read_text(encoding="utf-8")
except FileNotFoundError:
    long_description = """
    Data Import Orchestrator

    Resolves import job configurations from command line options and batch
    definition files, runs the jobs sequentially against a pluggable import
    engine and folds their reports into one exit status.
    """

setup(
    name="data-import-orchestrator",
    version="1.0.0",
    description="Command-line orchestrator for sequential data import jobs",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Data Import Orchestrator Team",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Database",
        "Topic :: System :: Systems Administration",
    ],
    keywords="data import, batch, orchestration, cli, async",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        # Core dependencies
        "click>=8.0.0",

        # Configuration and serialization
        "pyyaml>=6.0",
        "pydantic>=2.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "black>=22.0.0",
            "isort>=5.10.0",
            "mypy>=1.0.0",
            "coverage>=6.0.0",
            "flake8>=5.0.0",
        ],
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "data-import=data_import_orchestrator.cli.main:main",
        ],
    },
)
