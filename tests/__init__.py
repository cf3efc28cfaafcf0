"""
Test suite for polynumeral

Contains:
- tests/unit/          : Unit tests for individual modules
"""
