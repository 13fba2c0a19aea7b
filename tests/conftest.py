"""Shared fixtures for mediatypes tests."""

import logging

import pytest

from mediatypes.services import reset_state


@pytest.fixture(autouse=True)
def clean_state():
    """Start every test with fresh settings, table and package logger."""
    reset_state()
    yield
    reset_state()

    package_logger = logging.getLogger("mediatypes")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)
