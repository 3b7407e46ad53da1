"""Utility Endpoints: store/product slugs and storefront country detection.

Invariants:
    - Slug domains come from the `domain` query parameter, falling back to the
      tenant's own domain only when it is absent (an empty value is kept);
      both are sanitized with www stripped
    - detect-country fetches the tenant's homepage and hands the HTML to the
      capability; this core never parses it
"""

from storefront_api.core.capability_protocols import ShopClient
from storefront_api.core.domain_types import HttpMethod
from storefront_api.core.operation import (
    OperationDefinition, TenantResolver, ValidatedInput,
)
from storefront_api.infrastructure import storefront_http
from storefront_api.schemas.utils import ProductSlugQuery, StoreSlugQuery

_TAGS = ("utils",)
_SLUG_RESPONSE = {
    "type": "object",
    "properties": {"slug": {"type": "string"}},
}


def _slug_domain(shop: ShopClient, requested: str | None) -> str:
    domain = shop.domain if requested is None else requested
    return shop.utils.sanitize_domain(domain, strip_www=True)


def build_utils_endpoints(get_shop: TenantResolver) -> dict[str, OperationDefinition]:
    async def detect_country(data: ValidatedInput, shop: ShopClient):
        domain = shop.utils.sanitize_domain(shop.domain, strip_www=True)
        html = await storefront_http.fetch_homepage_html(domain)
        return await shop.utils.detect_shop_country(html)

    async def get_store_slug(data: ValidatedInput, shop: ShopClient):
        domain = _slug_domain(shop, data.query.domain)
        return {"slug": shop.utils.generate_store_slug(domain)}

    async def get_product_slug(data: ValidatedInput, shop: ShopClient):
        domain = _slug_domain(shop, data.query.domain)
        return {
            "slug": shop.utils.gen_product_slug(
                handle=data.query.handle, store_domain=domain,
            ),
        }

    return {
        "detectCountry": OperationDefinition(
            name="detectCountry",
            method=HttpMethod.GET,
            path="/utils/detect-country",
            handler=detect_country,
            resolve=get_shop,
            summary="Detect store country from homepage HTML",
            tags=_TAGS,
        ),
        "getStoreSlug": OperationDefinition(
            name="getStoreSlug",
            method=HttpMethod.GET,
            path="/utils/store-slug",
            handler=get_store_slug,
            resolve=get_shop,
            query_model=StoreSlugQuery,
            summary="Generate store slug from domain",
            tags=_TAGS,
            response_schema=_SLUG_RESPONSE,
        ),
        "getProductSlug": OperationDefinition(
            name="getProductSlug",
            method=HttpMethod.GET,
            path="/utils/product-slug",
            handler=get_product_slug,
            resolve=get_shop,
            query_model=ProductSlugQuery,
            summary="Generate product slug from handle and domain",
            tags=_TAGS,
            response_schema=_SLUG_RESPONSE,
        ),
    }
