"""Shared fixtures for planner tests."""

import os
import sys

import pytest

# Ensure tests/planner/ is on sys.path so test files can import the fakes
# unambiguously (avoids conftest module name collisions).
sys.path.insert(0, os.path.dirname(__file__))


def pytest_collection_modifyitems(items):
    for item in items:
        if "planner" in str(item.fspath) and "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def in_tmp(tmp_path, monkeypatch):
    """Run the test from inside a fresh temporary directory."""
    monkeypatch.chdir(tmp_path)
    return os.path.realpath(str(tmp_path))
