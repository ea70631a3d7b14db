"""
Core domain models, mathematical primitives, and invariants.

This module contains the arbitrary-precision BigNumber type: unsigned
base-256 algorithms in src.core.math and the signed value model in
src.core.domain. It has no I/O and no external system dependencies.
"""
