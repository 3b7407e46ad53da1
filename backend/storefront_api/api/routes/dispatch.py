"""Dispatch Route: forwards every method and path to the ShopRouter.

Invariants:
    - Registered last so reference routes take precedence
    - The route itself holds no logic beyond request/response translation
    - The router receives the path still percent-encoded (ASGI raw_path);
      path parameters are decoded once, by the router
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from storefront_api.services.request_dispatch import IncomingRequest, ShopRouter

router = APIRouter()

_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


def _encoded_path(request: Request) -> str:
    raw_path = request.scope.get("raw_path")
    if not raw_path:
        return request.url.path
    return raw_path.decode("latin-1").partition("?")[0]


@router.api_route("/{full_path:path}", methods=_METHODS, include_in_schema=False)
async def dispatch_request(full_path: str, request: Request) -> JSONResponse:
    shop_router: ShopRouter = request.app.state.shop_router
    outgoing = await shop_router.handle(IncomingRequest(
        method=request.method,
        path=_encoded_path(request),
        headers=dict(request.headers),
        query=dict(request.query_params),
        body=await request.body(),
    ))
    return JSONResponse(status_code=outgoing.status_code, content=outgoing.body)
