"""Core Layer — endpoint table, envelope rules, errors. No IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from infrastructure/ or httpx
    - All functions are pure and deterministic
"""
