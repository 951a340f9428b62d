from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
file persistence and the clean shutdown path.
"""

import logging
from logging.handlers import QueueHandler
from pathlib import Path

import pytest

from filetree.infra.logging import LoggingConfig, configure_logging, shutdown_logging
from filetree.infra.logging.core import _CONFIGURED_FLAG_ATTR, _QUEUE_LISTENER_ATTR
from filetree.infra.logging.handlers import _HANDLER_TAG_ATTR


@pytest.fixture(autouse=True)
def reset_logging():
    """Clean up our root logger handlers before and after each test."""
    shutdown_logging()
    yield
    shutdown_logging()


def _our_handlers() -> list:
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    """TC-01: Multiple config calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    initial = len(_our_handlers())
    configure_logging(cfg)

    assert initial == 1
    assert len(_our_handlers()) == initial


def test_force_reconfigures_level() -> None:
    configure_logging(LoggingConfig(level="WARNING"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert logging.getLogger().level == logging.DEBUG
    assert len(_our_handlers()) == 1


def test_root_receives_single_queue_handler() -> None:
    configure_logging(LoggingConfig(level="INFO"))
    root = logging.getLogger()

    assert isinstance(_our_handlers()[0], QueueHandler)
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not None
    assert getattr(root, _CONFIGURED_FLAG_ATTR) is True


def test_log_file_receives_records(tmp_path: Path) -> None:
    """TC-02: Records reach the rotating file once the queue is drained."""
    log_file = tmp_path / "logs" / "filetree.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))

    logging.getLogger("filetree.test").info("tree persisted")
    shutdown_logging()

    content = log_file.read_text(encoding="utf-8")
    assert "tree persisted" in content
    assert "filetree.test" in content
    assert "MainThread" in content


def test_unknown_level_falls_back_to_warning() -> None:
    configure_logging(LoggingConfig(level="chatty"))

    assert logging.getLogger().level == logging.WARNING


def test_level_number_is_case_and_space_insensitive() -> None:
    assert LoggingConfig(level=" debug ").level_number() == logging.DEBUG
    assert LoggingConfig(level="warn").level_number() == logging.WARNING
    assert LoggingConfig(level="").level_number() == logging.WARNING


def test_no_handlers_leaves_root_untouched() -> None:
    configure_logging(LoggingConfig(console=False, log_file=None))

    assert _our_handlers() == []


def test_shutdown_is_repeatable() -> None:
    configure_logging(LoggingConfig(level="INFO"))

    shutdown_logging()
    shutdown_logging()

    assert _our_handlers() == []
    assert getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR, None) is None
