#!/usr/bin/env python3
"""
Traversal Detector Setup

Generic path traversal detector for crawled web applications.
"""

from setuptools import find_packages, setup

required_packages = [
    "aiohttp>=3.9",
    "yarl>=1.9",
    "pydantic>=2.5",
    "pydantic-settings>=2.1",
]

test_packages = [
    "pytest>=7.4",
    "pytest-asyncio>=0.23",
]

setup(
    name="traversal-detector",
    version="1.2.0",
    description="Detects generic path traversal vulnerabilities from crawl results",
    packages=find_packages(include=["traversal_detector", "traversal_detector.*"]),
    python_requires=">=3.8",
    install_requires=required_packages,
    extras_require={"test": test_packages},
)
