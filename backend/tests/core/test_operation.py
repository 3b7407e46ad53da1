"""Operations: definition invariants, registry merging and input validation.

Tests cover:
    - Path params must agree with the params model
    - Definitions are immutable
    - Merging rejects duplicate (method, path) and duplicate names
    - validate_input collects errors from every location with prefixed fields
    - Malformed JSON is a validation failure; empty body reads as {}
"""

import dataclasses

import pytest
from pydantic import BaseModel

from storefront_api.core.domain_types import HttpMethod, OperationKey
from storefront_api.core.errors import DuplicateOperationError, RequestValidationFailed
from storefront_api.core.operation import (
    OperationDefinition, merge_operations, parse_json_body, validate_input,
)
from storefront_api.schemas.common import HandleParams, PaginatedCurrencyQuery


async def _handler(data, shop):
    return {"ok": True}


def _resolver(headers):
    raise AssertionError("resolver not expected in this test")


def _op(name="op", method=HttpMethod.GET, path="/things", **extra):
    return OperationDefinition(
        name=name, method=method, path=path,
        handler=_handler, resolve=_resolver, **extra,
    )


class _Body(BaseModel):
    title: str
    count: int


def test_key_is_method_and_path():
    op = _op(path="/things/:handle", params_model=HandleParams)
    assert op.key == OperationKey(HttpMethod.GET, "/things/:handle")
    assert str(op.key) == "GET /things/:handle"


def test_path_params_must_match_params_model():
    with pytest.raises(ValueError):
        _op(path="/things/:handle")
    with pytest.raises(ValueError):
        _op(path="/things", params_model=HandleParams)


def test_definition_is_frozen():
    op = _op()
    with pytest.raises(dataclasses.FrozenInstanceError):
        op.path = "/other"


def test_merge_operations_combines_groups():
    registry = merge_operations(
        {"a": _op(name="a", path="/a")},
        {"b": _op(name="b", path="/b"), "c": _op(name="c", method=HttpMethod.POST, path="/a")},
    )
    assert len(registry) == 3
    assert registry[OperationKey(HttpMethod.POST, "/a")].name == "c"


def test_merge_operations_rejects_duplicate_route():
    with pytest.raises(DuplicateOperationError) as exc_info:
        merge_operations(
            {"a": _op(name="a", path="/a")},
            {"other": _op(name="other", path="/a")},
        )
    assert exc_info.value.identity == "GET /a"


def test_merge_operations_rejects_duplicate_name():
    with pytest.raises(DuplicateOperationError):
        merge_operations(
            {"a": _op(name="a", path="/a")},
            {"a": _op(name="a", path="/b")},
        )


def test_validate_input_coerces_query():
    op = _op(path="/things", query_model=PaginatedCurrencyQuery)
    data = validate_input(op, {}, {"page": "2", "limit": "10"}, b"")
    assert data.query.page == 2
    assert data.query.limit == 10
    assert data.query.currency is None
    assert data.params is None
    assert data.body is None


def test_validate_input_collects_errors_from_every_location():
    op = _op(
        method=HttpMethod.POST, path="/things",
        query_model=PaginatedCurrencyQuery, body_model=_Body,
    )
    with pytest.raises(RequestValidationFailed) as exc_info:
        validate_input(op, {}, {"page": "abc"}, b'{"title": 3}')
    fields = {d["field"] for d in exc_info.value.details}
    assert "query.page" in fields
    assert "body.title" in fields
    assert "body.count" in fields


def test_validate_input_rejects_malformed_json():
    op = _op(method=HttpMethod.POST, path="/things", body_model=_Body)
    with pytest.raises(RequestValidationFailed) as exc_info:
        validate_input(op, {}, {}, b"{not json")
    assert exc_info.value.details[0]["type"] == "json_invalid"


def test_validate_input_rejects_non_object_body():
    op = _op(method=HttpMethod.POST, path="/things", body_model=_Body)
    with pytest.raises(RequestValidationFailed) as exc_info:
        validate_input(op, {}, {}, b"[1, 2]")
    assert exc_info.value.details[0]["field"] == "body"


def test_empty_body_reads_as_empty_object():
    assert parse_json_body(b"") == {}
    assert parse_json_body(b"   ") == {}


def test_body_ignored_when_operation_has_no_body_model():
    op = _op(method=HttpMethod.POST, path="/things")
    data = validate_input(op, {}, {}, b"{not json")
    assert data.body is None
