"""Root conftest: shared settings, fake storefront client, router and HTTP client.

Invariants:
    - Tests never reach a real storefront: the fake client factory is wired
      into every router and into the environment for the module-level app
    - Every test gets a fresh factory, router and app
"""

import os

os.environ.setdefault("SHOP_CLIENT_FACTORY", "tests.fake_shop_client:FakeShopClient")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest
from httpx import ASGITransport, AsyncClient

from storefront_api.config import Settings
from storefront_api.core.domain_types import ShopClientOptions
from storefront_api.main import create_app
from storefront_api.services.shop_service import better_shop
from tests.fake_shop_client import FakeShopClientFactory


@pytest.fixture
def shop_factory():
    return FakeShopClientFactory()


@pytest.fixture
def shop_router(shop_factory):
    return better_shop(shop_factory, ShopClientOptions(cache_ttl_ms=60_000))


@pytest.fixture
def settings():
    return Settings(shop_client_factory="tests.fake_shop_client:FakeShopClient")


@pytest.fixture
async def client(shop_router, settings):
    """HTTP client against the FastAPI app with the fake-backed router."""
    app = create_app(shop_router, settings)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
