"""Utility Schemas: query models for slug generation."""

from pydantic import Field

from storefront_api.schemas.common import QueryModel


class StoreSlugQuery(QueryModel):
    domain: str | None = None


class ProductSlugQuery(QueryModel):
    handle: str = Field(min_length=1)
    domain: str | None = None
