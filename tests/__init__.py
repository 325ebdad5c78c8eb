"""
Test suite for fraction-tree

Contains:
- tests/unit/          : Unit tests for individual modules
"""
