"""Collection Endpoints: collection listing, lookup and nested product retrieval.

Invariants:
    - getCollection raises ResourceNotFoundError for an absent collection
    - Nested product routes pass the collection handle through untouched
"""

from storefront_api.core.capability_protocols import ShopClient
from storefront_api.core.domain_types import HttpMethod
from storefront_api.core.errors import ResourceNotFoundError
from storefront_api.core.operation import (
    OperationDefinition, TenantResolver, ValidatedInput,
)
from storefront_api.schemas.common import (
    CurrencyQuery, HandleParams, PaginatedCurrencyQuery, PaginationQuery,
)

_TAGS = ("collections",)
_OBJECT_LIST = {"type": "array", "items": {"type": "object"}}
_STRING_LIST = {"type": "array", "items": {"type": "string"}}


def build_collection_endpoints(
    get_shop: TenantResolver,
) -> dict[str, OperationDefinition]:
    async def get_all_collections(data: ValidatedInput, shop: ShopClient):
        return await shop.collections.all()

    async def get_paginated_collections(data: ValidatedInput, shop: ShopClient):
        return await shop.collections.paginated(
            page=data.query.page, limit=data.query.limit,
        )

    async def get_showcased_collections(data: ValidatedInput, shop: ShopClient):
        return await shop.collections.showcased()

    async def get_collection(data: ValidatedInput, shop: ShopClient):
        collection = await shop.collections.find(data.params.handle)
        if collection is None:
            raise ResourceNotFoundError("Collection", data.params.handle)
        return collection

    async def get_collection_products_all(data: ValidatedInput, shop: ShopClient):
        return await shop.collections.products.all(
            data.params.handle, currency=data.query.currency,
        )

    async def get_collection_products_paginated(
        data: ValidatedInput, shop: ShopClient,
    ):
        return await shop.collections.products.paginated(
            data.params.handle,
            page=data.query.page,
            limit=data.query.limit,
            currency=data.query.currency,
        )

    async def get_collection_product_slugs(data: ValidatedInput, shop: ShopClient):
        return await shop.collections.products.slugs(data.params.handle)

    def operation(name, path, handler, summary, **extra):
        return OperationDefinition(
            name=name, method=HttpMethod.GET, path=path, handler=handler,
            resolve=get_shop, summary=summary, tags=_TAGS, **extra,
        )

    operations = [
        operation(
            "getAllCollections", "/collections/all",
            get_all_collections, "Get all collections",
            response_schema=_OBJECT_LIST,
        ),
        operation(
            "getPaginatedCollections", "/collections/paginated",
            get_paginated_collections, "Get paginated collections",
            query_model=PaginationQuery, response_schema=_OBJECT_LIST,
        ),
        operation(
            "getShowcasedCollections", "/collections/showcased",
            get_showcased_collections, "Get showcased collections",
            response_schema=_OBJECT_LIST,
        ),
        operation(
            "getCollection", "/collections/:handle",
            get_collection, "Get collection by handle",
            params_model=HandleParams,
        ),
        operation(
            "getCollectionProductsAll", "/collections/:handle/products/all",
            get_collection_products_all, "Get all products in collection",
            params_model=HandleParams, query_model=CurrencyQuery,
            response_schema=_OBJECT_LIST,
        ),
        operation(
            "getCollectionProductsPaginated",
            "/collections/:handle/products/paginated",
            get_collection_products_paginated,
            "Get paginated products in collection",
            params_model=HandleParams, query_model=PaginatedCurrencyQuery,
            response_schema=_OBJECT_LIST,
        ),
        operation(
            "getCollectionProductSlugs", "/collections/:handle/slugs",
            get_collection_product_slugs, "Get product slugs in collection",
            params_model=HandleParams, response_schema=_STRING_LIST,
        ),
    ]
    return {op.name: op for op in operations}
