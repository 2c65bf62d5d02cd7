# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from sitemap_scope.config import SitemapConfig, load_config
from sitemap_scope.models import SitemapFormat


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("detection_order: [rss, txt]", ".yaml", None),
        (json.dumps({"detection_order": ["rss", "txt"]}), ".json", None),
        ("detection_order: []", ".yml", ValidationError),
        ("detection_order: [xml, xml]", ".yaml", ValidationError),
        ("detection_order: [html]", ".yaml", ValidationError),
        ("allowed_schemes: ['']", ".yaml", ValidationError),
        ("unknown_key: 1", ".yaml", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- just\n- a list", ".yaml", TypeError),
        ("{broken json", ".json", ValueError),
        ("[1, 2]", ".json", TypeError),
        ("detection_order = ['xml']", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, SitemapConfig)
        assert cfg.detection_order == [SitemapFormat.RSS, SitemapFormat.TXT]


def test_defaults():
    cfg = SitemapConfig()
    assert cfg.detection_order == [SitemapFormat.XML, SitemapFormat.RSS, SitemapFormat.TXT]
    assert cfg.allowed_schemes == ["http", "https", "ftp", "file"]


def test_schemes_are_lowercased(tmp_path):
    cfg_path = write_file(tmp_path, "allowed_schemes: [HTTPS, ' Http ']", ".yaml")
    assert load_config(cfg_path).allowed_schemes == ["https", "http"]


def test_config_is_frozen():
    cfg = SitemapConfig()
    with pytest.raises(ValidationError):
        cfg.allowed_schemes = ["http"]  # type: ignore[misc]


def test_load_config_default_missing(tmp_path, monkeypatch):
    # No configs/default.yaml in cwd: built-in defaults are used
    monkeypatch.chdir(tmp_path)
    assert load_config(None) == SitemapConfig()


def test_load_config_default_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("detection_order: [txt]", encoding="utf-8")
    assert load_config().detection_order == [SitemapFormat.TXT]


def test_explicit_path_not_found(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")
