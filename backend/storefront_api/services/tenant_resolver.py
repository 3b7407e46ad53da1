"""Tenant Resolver: builds a per-request ShopClient from the shop-domain header.

Invariants:
    - Missing or blank header raises ShopDomainMissingError, never a validation error
    - A new handle is built on every call, even for the same domain
    - Every handle receives the same ShopClientOptions instance
"""

import logging
from collections.abc import Mapping

from storefront_api.core.capability_protocols import ShopClient, ShopClientFactory
from storefront_api.core.domain_types import (
    SHOP_DOMAIN_HEADER, ShopClientOptions, ShopDomain,
)
from storefront_api.core.errors import ShopDomainMissingError
from storefront_api.core.operation import TenantResolver

logger = logging.getLogger(__name__)


def read_shop_domain(
    headers: Mapping[str, str], header_name: str = SHOP_DOMAIN_HEADER,
) -> ShopDomain:
    """Case-insensitive lookup of the tenant header."""
    wanted = header_name.lower()
    for name, value in headers.items():
        if name.lower() == wanted and value and value.strip():
            return ShopDomain(value.strip())
    raise ShopDomainMissingError(header_name)


def make_get_shop(
    client_factory: ShopClientFactory,
    options: ShopClientOptions | None = None,
    header_name: str = SHOP_DOMAIN_HEADER,
) -> TenantResolver:
    """Return resolve(headers) -> ShopClient bound to fixed service options."""
    shared_options = options or ShopClientOptions()

    def get_shop(headers: Mapping[str, str]) -> ShopClient:
        domain = read_shop_domain(headers, header_name)
        logger.debug("Resolving shop client", extra={"shop_domain": domain})
        return client_factory(domain, shared_options)

    return get_shop
