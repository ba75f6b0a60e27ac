from __future__ import annotations

import logging

from skilltree.logging_config import configure_logging


def test_log_level_comes_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("SKILLTREE_LOG_LEVEL", "debug")
    try:
        configure_logging()
        assert logging.getLogger().level == logging.DEBUG
    finally:
        monkeypatch.delenv("SKILLTREE_LOG_LEVEL")
        configure_logging()


def test_telemetry_lines_can_be_silenced(monkeypatch) -> None:
    telemetry_logger = logging.getLogger("skilltree.telemetry")
    monkeypatch.setenv("SKILLTREE_TELEMETRY_LOG", "0")
    try:
        configure_logging()
        assert not telemetry_logger.isEnabledFor(logging.INFO)
        assert telemetry_logger.isEnabledFor(logging.WARNING)
    finally:
        monkeypatch.delenv("SKILLTREE_TELEMETRY_LOG")
        configure_logging()

    assert telemetry_logger.level == logging.NOTSET
    assert telemetry_logger.isEnabledFor(logging.INFO)
