from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
and log file rotation.
"""

import logging
import os
import time
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

import pytest

from devicespace.infra.logging import (
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
    get_default_log_path,
)


@pytest.fixture(autouse=True)
def reset_logging() -> None:
    """Clean up root logger handlers before and after each test."""
    def _reset() -> None:
        root = logging.getLogger()
        listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
        if listener and isinstance(listener, QueueListener) and listener._thread is not None:
            listener.stop()
        setattr(root, _QUEUE_LISTENER_ATTR, None)

        for h in list(root.handlers):
            if getattr(h, _HANDLER_TAG_ATTR, False):
                root.removeHandler(h)
                h.close()

        if hasattr(root, _CONFIGURED_FLAG_ATTR):
            delattr(root, _CONFIGURED_FLAG_ATTR)

    _reset()
    yield
    _reset()


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    """TC-01: Multiple config calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    initial_handler_count = len(_our_handlers())

    configure_logging(cfg)
    assert len(_our_handlers()) == initial_handler_count == 1


def test_force_reconfigures_level() -> None:
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert logging.getLogger().level == logging.DEBUG
    assert len(_our_handlers()) == 1


def test_queue_listener_architecture() -> None:
    """TC-02: The root logger uses a single QueueHandler feeding a listener."""
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    handlers = _our_handlers()

    assert len(handlers) == 1
    assert isinstance(handlers[0], QueueHandler)
    assert isinstance(getattr(root, _QUEUE_LISTENER_ATTR), QueueListener)


def test_log_file_receives_records(tmp_path: Path) -> None:
    """TC-03: Records reach the rotating file through the listener."""
    log_file = tmp_path / "logs" / "devicespace.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))

    logging.getLogger("devicespace.test").info("replay finished")

    listener = getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR)
    listener.stop()

    assert "replay finished" in log_file.read_text(encoding="utf-8")


def test_log_rotation(tmp_path: Path) -> None:
    """TC-04: File rotation when the size limit is exceeded."""
    log_file = tmp_path / "test_rotate.log"
    cfg = LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1,
    )

    configure_logging(cfg)
    logger = logging.getLogger("test_rotate")

    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)

    time.sleep(0.5)

    assert log_file.exists()
    assert (tmp_path / "test_rotate.log.1").exists(), "Rotation backup file was not created."


def test_no_outputs_leaves_root_unconfigured() -> None:
    configure_logging(LoggingConfig(console=False, log_file=None))
    assert _our_handlers() == []


def test_default_log_path_under_user_data_dir() -> None:
    path = get_default_log_path()
    assert path.endswith(os.path.join("logs", "devicespace.log"))
