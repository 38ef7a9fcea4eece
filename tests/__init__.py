"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Run only the web API tests
    python -m pytest tests/ -v -m "web"

    # Using unittest
    python -m unittest discover tests -v

The suite needs no external services: records are built in memory
(see tests/fixtures/records.py) or written to temporary YAML files.
"""
