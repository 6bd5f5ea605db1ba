"""
sunmoon Test Suite

This package contains all tests for the sunmoon ephemeris library.

Test Organization:
    tests/
    ├── __init__.py          # This file
    ├── conftest.py          # Shared location fixtures
    ├── integration/         # Event searches against known places and dates
    │   └── __init__.py
    └── unit/                # Unit tests, one module per source module
        └── __init__.py

Running Tests:
    # Run all tests
    pytest tests/

    # Run only the fast unit tests
    pytest tests/unit/

    # Run with coverage
    pytest tests/ --cov=services --cov=sunmoon --cov-report=html

Requirements:
    pip install -e ".[test]"
"""
