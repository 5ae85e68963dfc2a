"""
Test suite for scalar math primitives

Contains:
- tests/unit/          : Unit tests for individual modules
"""
