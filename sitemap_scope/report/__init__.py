"""sitemap_scope.report: JSON rendering of sitemaps used by the CLI and tests."""

from sitemap_scope.report.json_report import render_json, sitemap_to_dict

__all__ = ["render_json", "sitemap_to_dict"]
