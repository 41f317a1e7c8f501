"""
Test suite for bigint-core

Contains:
- tests/unit/          : Unit tests for digit-string primitives and BigInt
"""
