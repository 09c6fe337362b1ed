"""
Test suite for OI Core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
