"""Storefront HTTP: fetches a store's public homepage for country detection.

Invariants:
    - Redirects are followed; the response body is returned whatever its status
    - Transport failures map to StorefrontUnreachableError
"""

import logging

import httpx

from storefront_api.core.errors import StorefrontUnreachableError

logger = logging.getLogger(__name__)


async def fetch_homepage_html(
    domain: str, transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """GET https://<domain> and return the decoded body."""
    url = f"https://{domain}"
    try:
        async with httpx.AsyncClient(
            follow_redirects=True, transport=transport,
        ) as client:
            response = await client.get(url)
    except httpx.HTTPError as e:
        logger.warning(
            f"Homepage fetch failed for {domain}: {e}",
            extra={"shop_domain": domain},
        )
        raise StorefrontUnreachableError(domain, type(e).__name__) from e
    return response.text
