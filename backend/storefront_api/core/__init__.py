"""Core: pure types, path matching, operation definitions and error hierarchy.

Invariants:
    - No FastAPI imports; core is transport-neutral
    - Storefront clients reached only through capability Protocols
"""
