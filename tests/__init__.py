"""
Test suite for 2D geometry core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
