"""
Test suite for simcore

Contains:
- tests/unit/          : Unit tests for individual modules
"""
