"""Services: tenant resolution, endpoint builders, registry composition and dispatch.

Invariants:
    - Each define_*_endpoints module is independent of the others
    - Handlers receive a resolved ShopClient, never raw headers
"""
