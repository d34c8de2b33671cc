import logging
import sys

import pytest

from zerodi import setup_logging
from zerodi.core.logging import level_from_name


@pytest.fixture
def restore_root():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_installs_stdout_handler(restore_root):
    setup_logging("debug")
    assert restore_root.level == logging.DEBUG
    assert len(restore_root.handlers) == 1
    handler = restore_root.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stdout


def test_unknown_level_falls_back_to_info(restore_root):
    setup_logging("chatty")
    assert restore_root.level == logging.INFO


def test_level_from_name():
    assert level_from_name("warning") == logging.WARNING
    assert level_from_name("BASIC_FORMAT") == logging.INFO
