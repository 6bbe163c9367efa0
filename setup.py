#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Notice & MOM Generator - Setup Configuration
Enables the optional development dependency group.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
readme_path = Path(__file__).parent / "README.md"
long_description = readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""

# Read requirements
requirements_path = Path(__file__).parent / "requirements.txt"
requirements = []
if requirements_path.exists():
    requirements = [
        line.strip()
        for line in requirements_path.read_text(encoding="utf-8").splitlines()
        if line.strip() and not line.startswith("#")
    ]

setup(
    name="meeting-docs",
    version="1.0.0",
    description="Departmental meeting Notice and Minutes of Meeting generator (RTF + plain text)",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="CSE Department",
    python_requires=">=3.9",
    packages=find_packages(include=["docgen", "docgen.*", "config", "ai_providers", "api"]),
    install_requires=requirements,
    extras_require={
        # Development dependencies
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "meeting-docs=docgen.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "Topic :: Office/Business",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="rtf notice minutes meeting gemini openai",
)
