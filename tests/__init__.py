"""
Test suite for unitconv

Contains:
- tests/unit/          : Unit tests for individual modules
"""
