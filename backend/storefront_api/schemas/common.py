"""Shared Query Schemas: coercion rules for string-typed query parameters.

Invariants:
    - page/limit arrive as strings and leave as int; no range is enforced,
      the documented bounds (page >= 1, 1 <= limit <= 250) are advisory
    - A blank numeric value is treated as omitted, never as 0
    - force is True only for the literal string "true"
    - Unknown query parameters are ignored
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _truthy_flag(value: Any) -> Any:
    if isinstance(value, str):
        return value == "true"
    return value


QueryPage = Annotated[
    int | None,
    BeforeValidator(_blank_to_none),
    Field(json_schema_extra={"minimum": 1}),
]
QueryLimit = Annotated[
    int | None,
    BeforeValidator(_blank_to_none),
    Field(json_schema_extra={"minimum": 1, "maximum": 250}),
]
QueryFlag = Annotated[bool | None, BeforeValidator(_truthy_flag)]


class QueryModel(BaseModel):
    """Base for query schemas: frozen, extra parameters dropped."""
    model_config = ConfigDict(extra="ignore", frozen=True)


class CurrencyQuery(QueryModel):
    currency: str | None = None


class PaginationQuery(QueryModel):
    page: QueryPage = None
    limit: QueryLimit = None


class PaginatedCurrencyQuery(PaginationQuery):
    currency: str | None = None


class HandleParams(BaseModel):
    """Path parameters for `:handle` routes."""
    model_config = ConfigDict(frozen=True)

    handle: str = Field(min_length=1)


class LlmOptionsBody(BaseModel):
    """Optional model selection forwarded to LLM-backed capabilities."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    api_key: str | None = Field(None, alias="apiKey")
    model: str | None = None

    def as_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for the capability call, omitted fields dropped."""
        return self.model_dump(exclude_none=True)
