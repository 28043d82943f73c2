"""Setup configuration for scenario-split tool."""

from setuptools import setup, find_packages

setup(
    name="scenario-split",
    version="0.1.0",
    description="Render single-scenario feature files for parallel test runs",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
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
            "scenario-split=scenario_split.cli:main",
        ],
    },
)
