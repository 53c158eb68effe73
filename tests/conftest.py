"""Shared fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Undo run_app's handler setup so caplog sees records in every test."""
    logger = logging.getLogger("acapella_index")
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
