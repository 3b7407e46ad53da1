"""Store Endpoints: store info, cache invalidation and store-type classification.

Invariants:
    - clear-cache always answers {"success": true}, whatever the cache held
    - force is passed as None when omitted, never defaulted to False
"""

from storefront_api.core.capability_protocols import ShopClient
from storefront_api.core.domain_types import HttpMethod
from storefront_api.core.operation import (
    OperationDefinition, TenantResolver, ValidatedInput,
)
from storefront_api.schemas.store import InfoQuery, StoreTypeBody

_TAGS = ("store",)


def build_store_endpoints(get_shop: TenantResolver) -> dict[str, OperationDefinition]:
    async def get_info(data: ValidatedInput, shop: ShopClient):
        return await shop.get_info(force=data.query.force)

    async def clear_info_cache(data: ValidatedInput, shop: ShopClient):
        shop.clear_info_cache()
        return {"success": True}

    async def determine_store_type(data: ValidatedInput, shop: ShopClient):
        return await shop.determine_store_type(**data.body.as_kwargs())

    return {
        "getInfo": OperationDefinition(
            name="getInfo",
            method=HttpMethod.GET,
            path="/info",
            handler=get_info,
            resolve=get_shop,
            query_model=InfoQuery,
            summary="Get store info",
            tags=_TAGS,
        ),
        "clearInfoCache": OperationDefinition(
            name="clearInfoCache",
            method=HttpMethod.POST,
            path="/info/clear-cache",
            handler=clear_info_cache,
            resolve=get_shop,
            summary="Clear store info cache",
            tags=_TAGS,
            response_schema={
                "type": "object",
                "properties": {"success": {"type": "boolean"}},
            },
        ),
        "determineStoreType": OperationDefinition(
            name="determineStoreType",
            method=HttpMethod.POST,
            path="/store-type",
            handler=determine_store_type,
            resolve=get_shop,
            body_model=StoreTypeBody,
            summary="Determine store type",
            tags=_TAGS,
        ),
    }
