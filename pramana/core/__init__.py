"""
Core value types, arithmetic primitives, and identity.

Everything here is pure and deterministic: no I/O, no clocks, no shared
mutable state.
"""
