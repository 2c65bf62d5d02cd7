# sitemap_scope/report/json_report.py

"""
JSON rendering of a Sitemap.

Used by the CLI to print the result or to save it to a file.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from sitemap_scope.models import Sitemap


def sitemap_to_dict(sitemap: Sitemap) -> Dict[str, Any]:
    """Return a JSON-serialisable view of *sitemap* (the raw content is left out)."""
    return {
        "location": sitemap.location,
        "format": sitemap.format.value,
        "root_directory": sitemap.root_directory,
        "links": list(sitemap.links),
    }


def render_json(sitemap: Sitemap, output_path: Path | str, *, indent: Optional[int] = 2) -> Path:
    """
    Save *sitemap* as JSON at the given path.

    :param sitemap: the Sitemap to save
    :param output_path: path of the JSON file, parent directories are created
    :param indent: JSON indent, ``None`` for a single line
    :return: Path of the saved file

    Example:
    ```python
    from sitemap_scope.report.json_report import render_json
    report_path = render_json(sitemap, 'reports/sitemap.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(sitemap_to_dict(sitemap), f, ensure_ascii=False, indent=indent)

    return output
