"""Client Loader: resolves the storefront client factory from a dotted path.

Invariants:
    - Path format is "package.module:attribute"
    - Import happens on first use, not at application import time
    - Empty, malformed or unimportable paths raise ClientFactoryError
"""

import importlib
import logging
from functools import lru_cache

from storefront_api.core.capability_protocols import ShopClient, ShopClientFactory
from storefront_api.core.domain_types import ShopClientOptions, ShopDomain
from storefront_api.core.errors import ClientFactoryError

logger = logging.getLogger(__name__)


@lru_cache
def import_client_factory(path: str) -> ShopClientFactory:
    module_name, sep, attribute = path.partition(":")
    if not module_name or not sep or not attribute:
        raise ClientFactoryError(
            f"SHOP_CLIENT_FACTORY must look like 'package.module:attribute', got {path!r}",
        )
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ClientFactoryError(f"Cannot import {module_name}: {e}") from e
    factory = getattr(module, attribute, None)
    if not callable(factory):
        raise ClientFactoryError(f"{path} is not a callable client factory")
    logger.info(f"Loaded storefront client factory {path}")
    return factory


def lazy_client_factory(path: str) -> ShopClientFactory:
    """Factory that imports `path` when the first client is built."""

    def build(domain: ShopDomain, options: ShopClientOptions) -> ShopClient:
        if not path:
            raise ClientFactoryError("SHOP_CLIENT_FACTORY is not configured")
        return import_client_factory(path)(domain, options)

    return build
