# File: tests/test_logger.py
import logging
from logging.handlers import RotatingFileHandler

import pytest

from sitemap_scope.logger import configure, logger


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    configure()


def test_default_logger_writes_to_stderr_only():
    lg = configure()
    assert lg is logger
    assert lg.level == logging.WARNING
    assert lg.propagate is False
    assert [type(h) for h in lg.handlers] == [logging.StreamHandler]


def test_log_file_adds_rotating_handler(tmp_path):
    log_file = tmp_path / "scope.log"
    lg = configure(level="DEBUG", log_file=log_file, log_format="%(levelname)s %(message)s")
    assert any(isinstance(h, RotatingFileHandler) for h in lg.handlers)
    lg.debug("Format %s gives %d links", "xml", 2)
    assert log_file.read_text(encoding="utf-8").strip() == "DEBUG Format xml gives 2 links"


def test_replace_handlers_false_appends():
    configure()
    lg = configure(replace_handlers=False)
    assert len(lg.handlers) == 2
