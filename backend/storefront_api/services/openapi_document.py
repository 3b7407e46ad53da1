"""OpenAPI Document: derives a machine-readable API description from the registry.

Invariants:
    - One path item per operation, `:param` rendered as `{param}`
    - The shop-domain header is a required parameter on every operation
    - Nested body models are lifted into components.schemas
    - Output is plain dicts, deterministic for a given registry
"""

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel

from storefront_api.core.operation import OperationDefinition

_REF_TEMPLATE = "#/components/schemas/{model}"

_ERROR_SCHEMA = {
    "type": "object",
    "properties": {
        "error": {
            "type": "object",
            "properties": {
                "code": {"type": "string"},
                "message": {"type": "string"},
                "category": {"type": "string"},
                "severity": {"type": "string"},
                "details": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "field": {"type": "string"},
                            "message": {"type": "string"},
                            "type": {"type": "string"},
                        },
                    },
                },
            },
            "required": ["code", "message"],
        },
    },
}


def build_openapi_document(
    operations: Iterable[OperationDefinition],
    *,
    title: str,
    version: str,
    description: str = "",
    header_name: str = "x-shop-domain",
) -> dict[str, Any]:
    components: dict[str, Any] = {"ErrorResponse": _ERROR_SCHEMA}
    paths: dict[str, dict[str, Any]] = {}
    ordered = sorted(operations, key=lambda op: (op.path, op.method.value))
    for operation in ordered:
        path_item = paths.setdefault(operation.template.to_openapi(), {})
        path_item[operation.method.value.lower()] = _operation_object(
            operation, header_name, components,
        )
    return {
        "openapi": "3.1.0",
        "info": {"title": title, "version": version, "description": description},
        "paths": paths,
        "components": {"schemas": components},
    }


def _operation_object(
    operation: OperationDefinition, header_name: str, components: dict[str, Any],
) -> dict[str, Any]:
    parameters = [{
        "in": "header",
        "name": header_name,
        "required": True,
        "schema": {"type": "string"},
    }]
    parameters += _model_parameters(operation.params_model, "path")
    parameters += _model_parameters(operation.query_model, "query")

    error_ref = {
        "content": {
            "application/json": {
                "schema": {"$ref": _REF_TEMPLATE.format(model="ErrorResponse")},
            },
        },
    }
    result: dict[str, Any] = {
        "operationId": operation.name,
        "summary": operation.summary,
        "tags": list(operation.tags),
        "parameters": parameters,
        "responses": {
            "200": {
                "description": "OK",
                "content": {
                    "application/json": {"schema": operation.response_schema},
                },
            },
            "400": {"description": "Invalid request data", **error_ref},
            "500": {"description": "Server or storefront failure", **error_ref},
        },
    }
    if operation.body_model is not None:
        result["requestBody"] = {
            "required": True,
            "content": {
                "application/json": {
                    "schema": _body_schema(operation.body_model, components),
                },
            },
        }
    return result


def _model_parameters(
    model: type[BaseModel] | None, location: str,
) -> list[dict[str, Any]]:
    if model is None:
        return []
    schema = model.model_json_schema(by_alias=True)
    required = set(schema.get("required", []))
    return [
        {
            "in": location,
            "name": name,
            "required": location == "path" or name in required,
            "schema": _strip_nullable(prop),
        }
        for name, prop in schema.get("properties", {}).items()
    ]


def _strip_nullable(prop: dict[str, Any]) -> dict[str, Any]:
    """`anyOf: [X, null]` -> X plus sibling keywords, titles and null defaults dropped."""
    options = [o for o in prop.get("anyOf", []) if o.get("type") != "null"]
    if len(options) == 1:
        siblings = {k: v for k, v in prop.items() if k not in ("anyOf", "default")}
        cleaned = {**options[0], **siblings}
    else:
        cleaned = dict(prop)
    cleaned.pop("title", None)
    if prop.get("default") is not None:
        cleaned["default"] = prop["default"]
    return cleaned


def _body_schema(model: type[BaseModel], components: dict[str, Any]) -> dict[str, Any]:
    schema = model.model_json_schema(by_alias=True, ref_template=_REF_TEMPLATE)
    components.update(schema.pop("$defs", {}))
    return schema
