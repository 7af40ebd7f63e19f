#!/usr/bin/env python3
"""
Setup script for the tabular-sheets package
"""

from setuptools import setup, find_packages

setup(
    name="tabular-sheets",
    version="0.1.0",
    description="Read spreadsheets as header-addressable, type-coercing tables",
    packages=find_packages(include=["tabular", "tabular.*"]),
    python_requires=">=3.9",
    install_requires=[
        # 📋 Data Validation & Settings
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",

        # 📊 Spreadsheet reading
        "openpyxl>=3.1.2",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    package_data={
        "tabular": ["py.typed"],
    },
)
