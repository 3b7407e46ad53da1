"""Storefront API Package: multi-tenant storefront data as a typed RPC API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
