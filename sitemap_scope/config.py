# === FILE: sitemap_scope/config.py ===
"""
Loading and validation of the SitemapScope configuration.
Pydantic describes the schema and checks the data.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, List, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from sitemap_scope.models import SitemapFormat
from sitemap_scope.parser.url_filter import DEFAULT_SCHEMES


class SitemapConfig(BaseModel):
    """Settings shared by sitemap construction and format detection."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    detection_order: List[SitemapFormat] = Field(
        default_factory=lambda: list(SitemapFormat),
        min_length=1,
        description="Formats tried by detection; earlier wins on equal link counts.",
    )
    allowed_schemes: List[str] = Field(
        default_factory=lambda: list(DEFAULT_SCHEMES),
        min_length=1,
        description="URL schemes accepted for the location and for links.",
    )

    @field_validator("detection_order")
    @classmethod
    def _unique_formats(cls, v: List[SitemapFormat]) -> List[SitemapFormat]:
        if len(set(v)) != len(v):
            raise ValueError("detection_order must not repeat a format")
        return v

    @field_validator("allowed_schemes")
    @classmethod
    def _lower_schemes(cls, v: List[str]) -> List[str]:
        schemes = [s.strip().lower() for s in v]
        if not all(schemes):
            raise ValueError("allowed_schemes must not contain empty values")
        return schemes


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None] = None) -> SitemapConfig:
    """
    Read YAML or JSON and return a validated SitemapConfig.

    Without *path* the file ``configs/default.yaml`` is used when it exists,
    otherwise the built-in defaults. An explicit path that does not exist
    raises FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return SitemapConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return SitemapConfig(**data)


__all__ = ["SitemapConfig", "load_config"]
