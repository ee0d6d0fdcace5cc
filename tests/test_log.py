"""
Tests for logging setup.
"""

import logging

from app import log


def test_setup_installs_one_handler_across_restarts():
    root = logging.getLogger()
    level = root.level
    try:
        log.setup("DEBUG")
        log.setup("WARNING")

        handlers = [handler for handler in root.handlers if handler.get_name() == log.HANDLER_NAME]
        assert len(handlers) == 1
        assert root.level == logging.WARNING
    finally:
        for handler in list(root.handlers):
            if handler.get_name() == log.HANDLER_NAME:
                root.removeHandler(handler)
        root.setLevel(level)
