"""Shop Service: wires resolver, endpoint builders and router into one service."""

from collections.abc import Iterable

from storefront_api.core.capability_protocols import ShopClientFactory
from storefront_api.core.domain_types import SHOP_DOMAIN_HEADER, ShopClientOptions
from storefront_api.services.operations_registry import (
    ALL_ENDPOINT_BUILDERS, EndpointBuilder, build_operation_registry,
)
from storefront_api.services.request_dispatch import ShopRouter
from storefront_api.services.tenant_resolver import make_get_shop


def better_shop(
    client_factory: ShopClientFactory,
    options: ShopClientOptions | None = None,
    *,
    builders: Iterable[EndpointBuilder] = ALL_ENDPOINT_BUILDERS,
    header_name: str = SHOP_DOMAIN_HEADER,
    not_found_status: int = 500,
) -> ShopRouter:
    """Build the dispatchable router for every (or the given) capability group.

    Raises DuplicateOperationError if two builders claim the same route.
    """
    get_shop = make_get_shop(client_factory, options, header_name)
    registry = build_operation_registry(get_shop, builders)
    return ShopRouter(registry, not_found_status=not_found_status)
