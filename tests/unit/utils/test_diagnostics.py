r"""Unit tests for the diagnostic logger."""

from __future__ import annotations

import logging
from unittest.mock import Mock

import pytest

from aretry.utils.diagnostics import DiagnosticLogger


def test_diagnostic_logger_defaults() -> None:
    diagnostics = DiagnosticLogger()

    assert diagnostics.logger is logging.getLogger("aretry")
    assert not diagnostics.enabled


def test_diagnostic_logger_repr() -> None:
    assert repr(DiagnosticLogger(enabled=True)) == "DiagnosticLogger(logger='aretry', enabled=True)"


def test_diagnostic_logger_disabled_emits_nothing() -> None:
    logger = Mock(spec=logging.Logger)
    diagnostics = DiagnosticLogger(logger=logger, enabled=False)

    diagnostics.debug("message")
    diagnostics.warning("message")
    diagnostics.error("message", exc=ValueError())

    logger.log.assert_not_called()


def test_diagnostic_logger_levels(caplog: pytest.LogCaptureFixture) -> None:
    diagnostics = DiagnosticLogger(logger=logging.getLogger("tests.diagnostics"), enabled=True)

    with caplog.at_level(logging.DEBUG, logger="tests.diagnostics"):
        diagnostics.debug("tracing")
        diagnostics.warning("exhausted")
        diagnostics.error("hook failed")

    assert [(record.levelno, record.getMessage()) for record in caplog.records] == [
        (logging.DEBUG, "tracing"),
        (logging.WARNING, "exhausted"),
        (logging.ERROR, "hook failed"),
    ]


def test_diagnostic_logger_extra_fields(caplog: pytest.LogCaptureFixture) -> None:
    diagnostics = DiagnosticLogger(logger=logging.getLogger("tests.diagnostics"), enabled=True)

    with caplog.at_level(logging.DEBUG, logger="tests.diagnostics"):
        diagnostics.debug("waiting", attempt=2, delay=0.5)

    assert caplog.records[0].attempt == 2
    assert caplog.records[0].delay == 0.5


def test_diagnostic_logger_error_traceback(caplog: pytest.LogCaptureFixture) -> None:
    diagnostics = DiagnosticLogger(logger=logging.getLogger("tests.diagnostics"), enabled=True)
    try:
        raise ValueError("boom")
    except ValueError as exc:
        error = exc

    with caplog.at_level(logging.ERROR, logger="tests.diagnostics"):
        diagnostics.error("hook failed", exc=error)

    assert "ValueError: boom" in caplog.text


def test_diagnostic_logger_contains_logger_failure() -> None:
    logger = Mock(spec=logging.Logger)
    logger.log.side_effect = RuntimeError("broken handler")
    diagnostics = DiagnosticLogger(logger=logger, enabled=True)

    diagnostics.error("hook failed")

    logger.log.assert_called_once()
