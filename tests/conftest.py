"""Shared pytest fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def _detach_oca_log_handlers():
    """Close file handlers added by setup_logging so tests don't leak them."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_oca_handler", False):
            root.removeHandler(handler)
            handler.close()
