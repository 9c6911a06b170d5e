"""
Test suite for studystats

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/conftest.py    : Shared study session fixtures
"""
