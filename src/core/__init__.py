"""
Core numeric primitives, domain models and contracts.

This package contains the pure computational building blocks: no I/O,
no logging, no shared mutable state.
"""
