"""Shared pytest fixtures for tree-parser tests."""

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from tree_parser.core.environment import LOG_LEVEL_ENV_VAR, STRICT_ENV_VAR
from tree_parser.core.logging import ROOT_LOGGER_NAME
from tree_parser.core.manifest import reset_config


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch):
    """Each test starts without cached config, env overrides or log handlers."""
    monkeypatch.delenv(STRICT_ENV_VAR, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    reset_config()
    yield
    reset_config()
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True


@pytest.fixture
def expression_file(tmp_path: Path) -> Callable[[str], Path]:
    """Return a factory writing an expression to a temporary file."""

    def _write(source: str, name: str = "expr.txt") -> Path:
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return path

    return _write
