"""Setup configuration for fixture-runner tool."""

from setuptools import setup, find_packages

setup(
    name="fixture-runner",
    version="0.1.0",
    description="Run a program against numbered fixtures and diff its output",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pyyaml>=6.0",
        "click>=8.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "fixture-runner=fixture_runner.cli:main",
        ],
    },
)
