# tests/test_logging_setup.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from task_countdown.logging_setup import setup_logging


@pytest.fixture()
def restore_root_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_setup_logging_writes_to_returned_file(tmp_path: Path, restore_root_logging: None) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs")

    assert log_file == tmp_path / "logs" / "countdown.log"

    logging.getLogger("task_countdown.tests").info("hello from the store")
    for h in logging.getLogger().handlers:
        h.flush()

    assert "hello from the store" in log_file.read_text("utf-8")
