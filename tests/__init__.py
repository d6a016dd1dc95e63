"""
Test suite for BigInteger

Contains:
- tests/unit/          : Unit tests for individual modules
"""
