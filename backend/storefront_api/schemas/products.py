"""Product Schemas: body models for enrichment, classification and SEO endpoints."""

from typing import Literal

from pydantic import Field

from storefront_api.schemas.common import LlmOptionsBody


class EnrichedProductBody(LlmOptionsBody):
    """Enrichment options. inputType/outputFormat restricted to known formats."""
    use_gfm: bool | None = Field(None, alias="useGfm", strict=True)
    input_type: Literal["markdown", "html"] | None = Field(None, alias="inputType")
    output_format: Literal["markdown", "json"] | None = Field(None, alias="outputFormat")


class ClassifyProductBody(LlmOptionsBody):
    pass


class ProductSeoBody(LlmOptionsBody):
    pass
