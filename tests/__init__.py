"""
Test suite for Placement

Contains:
- tests/unit/          : Unit tests for individual modules
"""
