"""
Test suite for InfiniteInt

Contains:
- tests/unit/          : Unit tests for individual modules
"""
