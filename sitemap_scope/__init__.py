"""
SitemapScope package initializer.
Defines the package version and exposes the sitemap API and the CLI.
"""
__version__ = "0.1.0"

from sitemap_scope.config import SitemapConfig, load_config
from sitemap_scope.errors import (
    InvalidLocationError,
    MalformedDocumentError,
    SitemapError,
    UndetectableFormatError,
)
from sitemap_scope.models import Sitemap, SitemapFormat
from sitemap_scope.sitemap import build_sitemap, detect_sitemap

# Expose CLI entry point
from sitemap_scope.cli import cli as main_cli
from .cli import cli  # exported for pytest

__all__ = [
    "__version__",
    "Sitemap",
    "SitemapFormat",
    "SitemapConfig",
    "load_config",
    "build_sitemap",
    "detect_sitemap",
    "SitemapError",
    "InvalidLocationError",
    "MalformedDocumentError",
    "UndetectableFormatError",
    "cli",
    "main_cli",
]
