#!/usr/bin/env python
"""Setup configuration for Health Ledger Contracts."""

from setuptools import find_packages, setup

setup(
    name="health-ledger-contracts",
    version="0.1.0",
    description=(
        "In-process health data sharing, marketplace, personal health record "
        "and wearable device contracts"
    ),
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.5.0",
        "pydantic-settings>=2.0.0",
        "structlog>=23.2.0",
        "prometheus-client>=0.19.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "health-ledger=health_ledger.main:main",
        ],
    },
)
