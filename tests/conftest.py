"""
Pytest configuration file for the eagerseq tests.

This file ensures that the project root and the tests directory are in the
Python path so that test files can import eagerseq and the helpers module
without installing anything.
"""

import sys
from pathlib import Path

# Add the project root and this directory to the Python path
tests_dir = Path(__file__).parent
for path in (tests_dir.parent, tests_dir):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

import logging

import pytest

from helpers import explode, temperamental_iter


@pytest.fixture
def temperamental():
    """Factory for iterators that raise once pulled past their last element"""
    return temperamental_iter


@pytest.fixture
def bang():
    """A callback that fails the test if it is ever called"""
    return explode


@pytest.fixture
def debug_logs(caplog):
    """Capture eagerseq debug records"""
    caplog.set_level(logging.DEBUG, logger="eagerseq")
    return caplog
