"""Tests for infrastructure/logging.py."""

from __future__ import annotations

import sys
from collections.abc import Iterator

import pytest
from loguru import logger

import covreport
from covreport.infrastructure.logging import configure_logging


@pytest.fixture(autouse=True)
def restore_logger() -> Iterator[None]:
    """Reinstall loguru's default stderr handler after each test."""
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_quiet_drops_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False)
        logger.debug("hidden detail")
        logger.info("visible note")

        err = capsys.readouterr().err
        assert "hidden detail" not in err
        assert "visible note" in err

    def test_verbose_keeps_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True)
        logger.debug("hidden detail")

        assert "hidden detail" in capsys.readouterr().err

    def test_replaces_previous_handlers(self, capsys: pytest.CaptureFixture[str]) -> None:
        first = configure_logging()
        second = configure_logging()
        logger.info("once")

        assert first != second
        assert capsys.readouterr().err.count("once") == 1

    def test_exported_from_package(self) -> None:
        assert covreport.configure_logging is configure_logging
