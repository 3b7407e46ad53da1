"""Checkout Schemas: the order payload validated before a checkout URL is built.

Invariants:
    - email must be a syntactically valid address
    - items must contain at least one line; variant id and quantity stay strings
    - every address field is required

Design Decisions:
    - Wire names are camelCase (aliases); Python attributes are snake_case
    - Models are frozen: the payload handed to the capability cannot be mutated
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class CheckoutItem(_WireModel):
    product_variant_id: str = Field(alias="productVariantId")
    quantity: str


class CheckoutAddress(_WireModel):
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    address1: str
    city: str
    zip: str
    country: str
    province: str
    phone: str


class CheckoutPayload(_WireModel):
    email: EmailStr
    items: list[CheckoutItem] = Field(min_length=1)
    address: CheckoutAddress
