"""
Test suite for Pramana

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/unit/test_properties.py : Property-based tests (hypothesis)
"""
