"""Request Dispatch: matches a request to an operation and runs it end to end.

Invariants:
    - Order per request: route match -> input validation -> tenant resolution
      -> handler -> serialization
    - Headers are normalized once per request; handlers only see the resolved
      ShopClient, never raw headers
    - handle() never raises: every failure becomes an OutgoingResponse
    - Unexpected exceptions answer INTERNAL_ERROR without their message
    - The registry is read-only after construction; no per-request state is
      kept on the router

Design Decisions:
    - Routes grouped by method and pre-sorted by specificity: literal segments
      win over `:param` segments without runtime tie-breaking
    - ResourceNotFoundError status is a constructor argument (defaults to 500)
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from fastapi.encoders import jsonable_encoder

from storefront_api.core.domain_types import OperationKey
from storefront_api.core.errors import (
    ErrorCategory,
    ErrorContext,
    RouteNotFoundError,
    StorefrontApiError,
    internal_error_response,
)
from storefront_api.core.operation import (
    OperationDefinition, OperationRegistry, validate_input,
)
from storefront_api.core.path_template import split_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IncomingRequest:
    """Transport-neutral view of one HTTP request."""
    method: str
    path: str
    headers: Mapping[str, str] = field(default_factory=dict)
    query: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""


@dataclass(frozen=True)
class OutgoingResponse:
    status_code: int
    body: Any


class ShopRouter:
    """Routes (method, path) -> operation. Explicit registry, no auto-discovery."""

    def __init__(self, registry: OperationRegistry, not_found_status: int = 500):
        self._registry = MappingProxyType(dict(registry))
        self._not_found_status = not_found_status
        by_method: dict[str, list[OperationDefinition]] = {}
        for operation in self._registry.values():
            by_method.setdefault(operation.method.value, []).append(operation)
        self._routes = {
            method: tuple(sorted(ops, key=lambda op: op.template.specificity()))
            for method, ops in by_method.items()
        }

    @property
    def operations(self) -> Mapping[OperationKey, OperationDefinition]:
        return self._registry

    def match(
        self, method: str, path: str,
    ) -> tuple[OperationDefinition, dict[str, str]] | None:
        """First structural match among the method's routes, literals first."""
        segments = split_path(path)
        for operation in self._routes.get(method.upper(), ()):
            params = operation.template.match(segments)
            if params is not None:
                return operation, params
        return None

    async def handle(self, request: IncomingRequest) -> OutgoingResponse:
        context = ErrorContext(method=request.method.upper(), path=request.path)
        try:
            return await self._dispatch(request, context)
        except StorefrontApiError as exc:
            return self._error_response(exc, context)
        except Exception as exc:
            logger.error(
                f"Unhandled exception on {context.method} {context.path}: {exc}",
                exc_info=True,
                extra={
                    "operation": context.operation,
                    "shop_domain": context.shop_domain,
                },
            )
            return OutgoingResponse(500, internal_error_response())

    async def _dispatch(
        self, request: IncomingRequest, context: ErrorContext,
    ) -> OutgoingResponse:
        matched = self.match(context.method, request.path)
        if matched is None:
            raise RouteNotFoundError(context.method, request.path)
        operation, params = matched
        context.operation = operation.name

        headers = {name.lower(): value for name, value in request.headers.items()}
        data = validate_input(operation, params, request.query, request.body)
        shop = operation.resolve(headers)
        context.shop_domain = shop.domain

        result = await operation.handler(data, shop)
        body = jsonable_encoder(result)
        logger.info(
            f"{context.method} {context.path} -> 200",
            extra={
                "operation": operation.name,
                "shop_domain": context.shop_domain,
                "status_code": 200,
            },
        )
        return OutgoingResponse(200, body)

    def _error_response(
        self, exc: StorefrontApiError, context: ErrorContext,
    ) -> OutgoingResponse:
        exc.context.method = context.method
        exc.context.path = context.path
        exc.context.operation = exc.context.operation or context.operation
        exc.context.shop_domain = exc.context.shop_domain or context.shop_domain

        status_code = exc.http_status
        if exc.category is ErrorCategory.RESOURCE_NOT_FOUND:
            status_code = self._not_found_status

        log = logger.warning if status_code < 500 else logger.error
        log(
            f"{exc.code} on {context.method} {context.path}: {exc.message}",
            extra={
                "error_code": exc.code,
                "operation": context.operation,
                "shop_domain": context.shop_domain,
                "status_code": status_code,
            },
        )
        return OutgoingResponse(status_code, exc.to_response())
