"""Capability Protocols: contracts between the API core and the storefront client.

Invariants:
    - Core NEVER imports a concrete storefront client; it depends on these Protocols
    - One ShopClient instance is scoped to one store domain and one request
    - Async methods perform IO and are awaited by handlers; sync methods are pure

Design Decisions:
    - Protocol over ABC: structural subtyping, any compliant client can be substituted
    - Capabilities grouped by domain (products, collections, checkout, utils),
      mirroring the endpoint builders that consume them
"""

from typing import Any, Literal, Protocol

from storefront_api.core.domain_types import ShopClientOptions, ShopDomain
from storefront_api.schemas.checkout import CheckoutPayload


class ProductCapability(Protocol):
    """Product retrieval and LLM-backed enrichment."""
    async def all(self, *, currency: str | None = None) -> list[Any]: ...
    async def paginated(
        self,
        *,
        page: int | None = None,
        limit: int | None = None,
        currency: str | None = None,
    ) -> list[Any]: ...
    async def showcased(self) -> list[Any]: ...
    async def filter(self) -> dict[str, list[str]] | None: ...
    async def find(self, handle: str, *, currency: str | None = None) -> Any | None: ...
    async def enriched(
        self,
        handle: str,
        *,
        api_key: str | None = None,
        use_gfm: bool | None = None,
        input_type: Literal["markdown", "html"] | None = None,
        model: str | None = None,
        output_format: Literal["markdown", "json"] | None = None,
    ) -> Any: ...
    async def classify(
        self, handle: str, *, api_key: str | None = None, model: str | None = None,
    ) -> Any: ...
    async def generate_seo_content(
        self, handle: str, *, api_key: str | None = None, model: str | None = None,
    ) -> Any: ...


class CollectionProductCapability(Protocol):
    """Products nested inside one collection."""
    async def all(self, handle: str, *, currency: str | None = None) -> list[Any] | None: ...
    async def paginated(
        self,
        handle: str,
        *,
        page: int | None = None,
        limit: int | None = None,
        currency: str | None = None,
    ) -> list[Any] | None: ...
    async def slugs(self, handle: str) -> list[str] | None: ...


class CollectionCapability(Protocol):
    """Collection retrieval."""
    products: CollectionProductCapability

    async def all(self) -> list[Any]: ...
    async def paginated(
        self, *, page: int | None = None, limit: int | None = None,
    ) -> list[Any]: ...
    async def showcased(self) -> list[Any]: ...
    async def find(self, handle: str) -> Any | None: ...


class CheckoutCapability(Protocol):
    """Checkout URL construction."""
    def create_url(self, payload: CheckoutPayload) -> str: ...


class DomainUtilities(Protocol):
    """Domain helpers: slugs, sanitization and country detection."""
    def sanitize_domain(self, domain: str, *, strip_www: bool = False) -> str: ...
    def generate_store_slug(self, domain: str) -> str: ...
    def gen_product_slug(self, *, handle: str, store_domain: str) -> str: ...
    async def detect_shop_country(self, html: str) -> Any: ...


class ShopClient(Protocol):
    """Per-request tenant handle. Structural contract for storefront clients."""
    domain: str
    products: ProductCapability
    collections: CollectionCapability
    checkout: CheckoutCapability
    utils: DomainUtilities

    async def get_info(self, *, force: bool | None = None) -> Any: ...
    def clear_info_cache(self) -> None: ...
    async def determine_store_type(
        self,
        *,
        api_key: str | None = None,
        model: str | None = None,
        max_showcase_products: int | None = None,
        max_showcase_collections: int | None = None,
    ) -> Any: ...


class ShopClientFactory(Protocol):
    """Builds a ShopClient bound to one domain."""
    def __call__(self, domain: ShopDomain, options: ShopClientOptions) -> ShopClient: ...
