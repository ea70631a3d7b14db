"""
Test suite for BigNumber

Contains:
- tests/unit/          : Unit tests for magnitude kernels and the BigNumber model
"""
