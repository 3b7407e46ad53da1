"""Domain Types: small value types shared by the registry, dispatcher and builders.

Invariants:
    - HTTP verbs encoded as an Enum, never raw string matching
    - OperationKey identity is (method, path template); unique across a registry
    - ShopClientOptions is frozen: one instance per service, shared read-only

Design Decisions:
    - NewType for ShopDomain: zero runtime cost, keeps bare str out of signatures
    - str Enums: serialize to JSON and OpenAPI without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, NewType


ShopDomain = NewType("ShopDomain", str)

SHOP_DOMAIN_HEADER = "x-shop-domain"


class HttpMethod(str, Enum):
    """Verbs an operation can be registered under."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class OperationKey(NamedTuple):
    """Registry identity of an operation."""
    method: HttpMethod
    path: str

    def __str__(self) -> str:
        return f"{self.method.value} {self.path}"


@dataclass(frozen=True)
class ShopClientOptions:
    """Service-wide storefront client configuration, fixed at startup."""
    cache_ttl_ms: int | None = None
