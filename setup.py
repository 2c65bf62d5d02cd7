# setup.py
from setuptools import setup, find_packages

setup(
    name="sitemap_scope",
    version="0.1.0",
    description="Format detection and scoped link extraction for XML, RSS and TXT sitemaps",
    packages=find_packages(exclude=["tests", "tests.*"]),  # finds the sitemap_scope folder
    install_requires=[
        "lxml>=4.9",
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "click>=8.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "sitemap-scope=sitemap_scope.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
