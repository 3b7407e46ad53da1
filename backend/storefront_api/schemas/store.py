"""Store Schemas: query and body models for store info and store-type endpoints."""

from pydantic import Field, NonNegativeInt

from storefront_api.schemas.common import LlmOptionsBody, QueryFlag, QueryModel


class InfoQuery(QueryModel):
    force: QueryFlag = None


class StoreTypeBody(LlmOptionsBody):
    """Options for classifying the store's vertical and audience."""
    max_showcase_products: NonNegativeInt | None = Field(None, alias="maxShowcaseProducts")
    max_showcase_collections: NonNegativeInt | None = Field(
        None, alias="maxShowcaseCollections",
    )
