"""API Reference Routes: OpenAPI JSON and a Scalar viewer generated from the registry.

Invariants:
    - Document built once per router; the registry never changes afterwards
    - No shop-domain header required to read the reference
"""

import json

from fastapi import APIRouter
from fastapi.responses import HTMLResponse, JSONResponse

from storefront_api.config import Settings
from storefront_api.services.openapi_document import build_openapi_document
from storefront_api.services.request_dispatch import ShopRouter

_SCALAR_PAGE = """<!doctype html>
<html>
  <head>
    <title>{title}</title>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
  </head>
  <body>
    <script id="api-reference" data-url="{spec_url}" data-configuration='{configuration}'></script>
    <script src="https://cdn.jsdelivr.net/npm/@scalar/api-reference"></script>
  </body>
</html>
"""


def build_reference_router(shop_router: ShopRouter, settings: Settings) -> APIRouter:
    router = APIRouter(prefix=settings.docs_path, tags=["reference"])
    document = build_openapi_document(
        shop_router.operations.values(),
        title=settings.api_title,
        version=settings.api_version,
        description=settings.api_description,
        header_name=settings.shop_domain_header,
    )
    spec_url = f"{settings.docs_path}/openapi.json"
    page = _SCALAR_PAGE.format(
        title=settings.api_title,
        spec_url=spec_url,
        configuration=json.dumps({"theme": "dark"}),
    )

    @router.get("/openapi.json", include_in_schema=False)
    async def openapi_json():
        return JSONResponse(document)

    @router.get("", include_in_schema=False)
    async def reference_page():
        return HTMLResponse(page)

    return router
