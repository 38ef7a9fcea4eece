"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For record builders, see tests/fixtures/records.py
"""

import copy

import pytest
import yaml

from tests.fixtures.records import RAW_VOLUNTEER, RAW_EVENT


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "web: marks tests that exercise the FastAPI application"
    )


@pytest.fixture
def raw_records():
    """A records document with one volunteer and one event."""
    return {
        "volunteers": [copy.deepcopy(RAW_VOLUNTEER)],
        "events": [copy.deepcopy(RAW_EVENT)],
    }


@pytest.fixture
def records_file(tmp_path, raw_records):
    """The raw_records document written to a temporary YAML file."""
    path = tmp_path / "records.yaml"
    path.write_text(yaml.safe_dump(raw_records), encoding="utf-8")
    return path
