"""Operations: immutable endpoint definitions, input validation and registry merging.

Invariants:
    - OperationDefinition is frozen and identified by (method, path)
    - Merging registries with a colliding identity or name raises
      DuplicateOperationError at construction time
    - validate_input never calls the handler; it either returns a complete
      ValidatedInput or raises RequestValidationFailed with every field error
    - Path, query and body are validated independently; error fields are
      prefixed with their location

Design Decisions:
    - Pydantic models as the per-operation schema: coercion of query strings
      comes from the model field types, not from handler code
    - Operations carry the tenant resolver their builder was given; the
      dispatcher calls it once per request and passes the handle explicitly
"""

import json
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ValidationError

from storefront_api.core.capability_protocols import ShopClient
from storefront_api.core.domain_types import HttpMethod, OperationKey
from storefront_api.core.errors import DuplicateOperationError, RequestValidationFailed
from storefront_api.core.path_template import PathTemplate

TenantResolver = Callable[[Mapping[str, str]], ShopClient]


@dataclass(frozen=True)
class ValidatedInput:
    """Typed view of one request's path params, query and body."""
    params: Any = None
    query: Any = None
    body: Any = None


OperationHandler = Callable[[ValidatedInput, ShopClient], Awaitable[Any]]


@dataclass(frozen=True)
class OperationDefinition:
    """One addressable (method, path) unit of the API."""
    name: str
    method: HttpMethod
    path: str
    handler: OperationHandler
    resolve: TenantResolver
    params_model: type[BaseModel] | None = None
    query_model: type[BaseModel] | None = None
    body_model: type[BaseModel] | None = None
    summary: str = ""
    tags: tuple[str, ...] = ()
    response_schema: dict[str, Any] = field(
        default_factory=lambda: {"type": "object"},
    )
    template: PathTemplate = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "template", PathTemplate.parse(self.path))
        declared = set(self.template.param_names)
        modelled = set(self.params_model.model_fields) if self.params_model else set()
        if declared != modelled:
            raise ValueError(
                f"{self.name}: path params {sorted(declared)} "
                f"do not match params model fields {sorted(modelled)}",
            )

    @property
    def key(self) -> OperationKey:
        return OperationKey(self.method, self.path)


OperationRegistry = dict[OperationKey, OperationDefinition]


def merge_operations(*groups: Mapping[str, OperationDefinition]) -> OperationRegistry:
    """Merge named operation groups into one registry keyed by (method, path)."""
    registry: OperationRegistry = {}
    names: set[str] = set()
    for group in groups:
        for operation in group.values():
            if operation.key in registry:
                raise DuplicateOperationError(str(operation.key))
            if operation.name in names:
                raise DuplicateOperationError(operation.name)
            registry[operation.key] = operation
            names.add(operation.name)
    return registry


# ─── Validation ──────────────────────────────────────────────────

def parse_json_body(raw: bytes) -> Any:
    """Decode a request body. Empty body reads as an empty object."""
    if not raw or not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise RequestValidationFailed([{
            "field": "body",
            "message": f"Malformed JSON: {e}",
            "type": "json_invalid",
        }])


def validate_input(
    operation: OperationDefinition,
    params: Mapping[str, str],
    query: Mapping[str, str],
    raw_body: bytes,
) -> ValidatedInput:
    """Validate every part the operation declares a model for."""
    details: list[dict[str, str]] = []
    validated_params = _validate_part(operation.params_model, dict(params), "path", details)
    validated_query = _validate_part(operation.query_model, dict(query), "query", details)
    validated_body = None
    if operation.body_model is not None:
        body = parse_json_body(raw_body)
        validated_body = _validate_part(operation.body_model, body, "body", details)
    if details:
        raise RequestValidationFailed(details)
    return ValidatedInput(
        params=validated_params, query=validated_query, body=validated_body,
    )


def _validate_part(
    model: type[BaseModel] | None,
    data: Any,
    location: str,
    details: list[dict[str, str]],
) -> BaseModel | None:
    if model is None:
        return None
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        details.extend(_format_errors(exc, location))
        return None


def _format_errors(exc: ValidationError, location: str) -> list[dict[str, str]]:
    return [
        {
            "field": ".".join([location, *(str(loc) for loc in e["loc"])]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
