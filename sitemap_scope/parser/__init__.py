"""sitemap_scope.parser: Link extraction per document format and URL scoping."""
