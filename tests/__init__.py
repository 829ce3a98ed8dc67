"""
Test suite for the fiscal engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
