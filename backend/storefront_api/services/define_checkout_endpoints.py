"""Checkout Endpoints: builds a checkout URL from a validated order payload."""

from storefront_api.core.capability_protocols import ShopClient
from storefront_api.core.domain_types import HttpMethod
from storefront_api.core.operation import (
    OperationDefinition, TenantResolver, ValidatedInput,
)
from storefront_api.schemas.checkout import CheckoutPayload


def build_checkout_endpoints(
    get_shop: TenantResolver,
) -> dict[str, OperationDefinition]:
    async def create_checkout_url(data: ValidatedInput, shop: ShopClient):
        return {"url": shop.checkout.create_url(data.body)}

    return {
        "createCheckoutUrl": OperationDefinition(
            name="createCheckoutUrl",
            method=HttpMethod.POST,
            path="/checkout/url",
            handler=create_checkout_url,
            resolve=get_shop,
            body_model=CheckoutPayload,
            summary="Create checkout URL",
            tags=("checkout",),
            response_schema={
                "type": "object",
                "properties": {"url": {"type": "string"}},
            },
        ),
    }
