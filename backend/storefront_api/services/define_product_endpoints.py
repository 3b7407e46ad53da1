"""Product Endpoints: listing, lookup and LLM-backed product operations.

Invariants:
    - getProduct never answers with a null body: an absent product raises
      ResourceNotFoundError
    - page/limit reach the capability as int or None
    - LLM options forwarded as snake_case keywords, omitted ones dropped
"""

from storefront_api.core.capability_protocols import ShopClient
from storefront_api.core.domain_types import HttpMethod
from storefront_api.core.errors import ResourceNotFoundError
from storefront_api.core.operation import (
    OperationDefinition, TenantResolver, ValidatedInput,
)
from storefront_api.schemas.common import (
    CurrencyQuery, HandleParams, PaginatedCurrencyQuery,
)
from storefront_api.schemas.products import (
    ClassifyProductBody, EnrichedProductBody, ProductSeoBody,
)

_TAGS = ("products",)
_OBJECT_LIST = {"type": "array", "items": {"type": "object"}}


def build_product_endpoints(get_shop: TenantResolver) -> dict[str, OperationDefinition]:
    async def get_all_products(data: ValidatedInput, shop: ShopClient):
        return await shop.products.all(currency=data.query.currency)

    async def get_paginated_products(data: ValidatedInput, shop: ShopClient):
        return await shop.products.paginated(
            page=data.query.page,
            limit=data.query.limit,
            currency=data.query.currency,
        )

    async def get_showcased_products(data: ValidatedInput, shop: ShopClient):
        return await shop.products.showcased()

    async def get_product_filters(data: ValidatedInput, shop: ShopClient):
        return await shop.products.filter()

    async def get_product(data: ValidatedInput, shop: ShopClient):
        product = await shop.products.find(
            data.params.handle, currency=data.query.currency,
        )
        if product is None:
            raise ResourceNotFoundError("Product", data.params.handle)
        return product

    async def get_enriched_product(data: ValidatedInput, shop: ShopClient):
        return await shop.products.enriched(
            data.params.handle, **data.body.as_kwargs(),
        )

    async def classify_product(data: ValidatedInput, shop: ShopClient):
        return await shop.products.classify(
            data.params.handle, **data.body.as_kwargs(),
        )

    async def generate_product_seo(data: ValidatedInput, shop: ShopClient):
        return await shop.products.generate_seo_content(
            data.params.handle, **data.body.as_kwargs(),
        )

    def operation(name, method, path, handler, summary, **extra):
        return OperationDefinition(
            name=name, method=method, path=path, handler=handler,
            resolve=get_shop, summary=summary, tags=_TAGS, **extra,
        )

    operations = [
        operation(
            "getAllProducts", HttpMethod.GET, "/products/all",
            get_all_products, "Get all products",
            query_model=CurrencyQuery, response_schema=_OBJECT_LIST,
        ),
        operation(
            "getPaginatedProducts", HttpMethod.GET, "/products/paginated",
            get_paginated_products, "Get paginated products",
            query_model=PaginatedCurrencyQuery, response_schema=_OBJECT_LIST,
        ),
        operation(
            "getShowcasedProducts", HttpMethod.GET, "/products/showcased",
            get_showcased_products, "Get showcased products",
            response_schema=_OBJECT_LIST,
        ),
        operation(
            "getProductFilters", HttpMethod.GET, "/products/filters",
            get_product_filters, "Get product filters",
        ),
        operation(
            "getProduct", HttpMethod.GET, "/products/:handle",
            get_product, "Get product by handle",
            params_model=HandleParams, query_model=CurrencyQuery,
        ),
        operation(
            "getEnrichedProduct", HttpMethod.POST, "/products/:handle/enriched",
            get_enriched_product, "Get enriched product",
            params_model=HandleParams, body_model=EnrichedProductBody,
        ),
        operation(
            "classifyProduct", HttpMethod.POST, "/products/:handle/classify",
            classify_product, "Classify product",
            params_model=HandleParams, body_model=ClassifyProductBody,
        ),
        operation(
            "generateProductSEO", HttpMethod.POST, "/products/:handle/seo",
            generate_product_seo, "Generate product SEO",
            params_model=HandleParams, body_model=ProductSeoBody,
        ),
    ]
    return {op.name: op for op in operations}
