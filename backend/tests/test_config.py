"""Settings: environment overrides and validation."""

import pytest
from pydantic import ValidationError

from storefront_api.config import Settings


def test_defaults():
    settings = Settings(shop_client_factory="")
    assert settings.cache_ttl_ms == 60_000
    assert settings.shop_domain_header == "x-shop-domain"
    assert settings.not_found_status == 500
    assert settings.docs_path == "/api/reference"
    assert settings.api_title == "Better Shop API"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("NOT_FOUND_STATUS", "404")
    monkeypatch.setenv("CACHE_TTL_MS", "1000")
    settings = Settings()
    assert settings.not_found_status == 404
    assert settings.cache_ttl_ms == 1000


@pytest.mark.parametrize("status", [200, 302, 600])
def test_not_found_status_must_be_error_status(status):
    with pytest.raises(ValidationError):
        Settings(not_found_status=status)
