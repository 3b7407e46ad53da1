"""Operations Registry: composes endpoint builders into one operation registry.

Invariants:
    - Builders are independent; any subset may be composed
    - Omitting a builder omits exactly its routes
    - A (method, path) defined by two builders fails here, before any request

Design Decisions:
    - Explicit builder list, no auto-discovery: every capability group is
      visible in one place
"""

from collections.abc import Callable, Iterable

from storefront_api.core.operation import (
    OperationDefinition, OperationRegistry, TenantResolver, merge_operations,
)
from storefront_api.services.define_checkout_endpoints import build_checkout_endpoints
from storefront_api.services.define_collection_endpoints import (
    build_collection_endpoints,
)
from storefront_api.services.define_product_endpoints import build_product_endpoints
from storefront_api.services.define_store_endpoints import build_store_endpoints
from storefront_api.services.define_utils_endpoints import build_utils_endpoints

EndpointBuilder = Callable[[TenantResolver], dict[str, OperationDefinition]]

ALL_ENDPOINT_BUILDERS: tuple[EndpointBuilder, ...] = (
    build_store_endpoints,        # 3 operations
    build_product_endpoints,      # 8 operations
    build_collection_endpoints,   # 7 operations
    build_checkout_endpoints,     # 1 operation
    build_utils_endpoints,        # 3 operations
)
# Total: 22


def build_operation_registry(
    get_shop: TenantResolver,
    builders: Iterable[EndpointBuilder] = ALL_ENDPOINT_BUILDERS,
) -> OperationRegistry:
    """Run each builder against the shared resolver and merge the results."""
    return merge_operations(*(build(get_shop) for build in builders))
