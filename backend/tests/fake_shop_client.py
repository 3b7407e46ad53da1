"""Fake Shop Client: in-memory storefront client implementing the capability Protocols.

Invariants:
    - Handle "exists" is found by products.find / collections.find; any other is None
    - products.paginated echoes the page it received
    - Every capability call is appended to the shared `calls` log as (name, args, kwargs)
    - FakeShopClientFactory records every client it builds

Design Decisions:
    - Flat fake classes (no inheritance): simple, explicit, easy to debug
    - Canned data mirrors what the storefront client returns for a mock store
"""

import re

SHOP_DOMAIN = "mock.myshopify.com"
HEADERS = {"x-shop-domain": SHOP_DOMAIN}

CHECKOUT_PAYLOAD = {
    "email": "test@example.com",
    "items": [{"productVariantId": "123", "quantity": "1"}],
    "address": {
        "firstName": "John",
        "lastName": "Doe",
        "address1": "123 St",
        "city": "City",
        "zip": "12345",
        "country": "US",
        "province": "CA",
        "phone": "1234567890",
    },
}


class _Recorder:
    def __init__(self, calls: list, prefix: str):
        self._calls = calls
        self._prefix = prefix

    def _record(self, name, *args, **kwargs):
        self._calls.append((f"{self._prefix}{name}", args, kwargs))


class FakeProducts(_Recorder):
    async def all(self, *, currency=None):
        self._record("all", currency=currency)
        return [{"id": "1", "title": "Product 1"}]

    async def paginated(self, *, page=None, limit=None, currency=None):
        self._record("paginated", page=page, limit=limit, currency=currency)
        return [{"id": "1", "title": "Product 1", "page": page}]

    async def showcased(self):
        self._record("showcased")
        return [{"id": "2", "title": "Showcased Product"}]

    async def filter(self):
        self._record("filter")
        return {"Size": ["S", "M"]}

    async def find(self, handle, *, currency=None):
        self._record("find", handle, currency=currency)
        if handle == "exists":
            return {"id": "3", "title": "Product 3"}
        return None

    async def enriched(self, handle, **options):
        self._record("enriched", handle, **options)
        return {"id": "3", "title": "Product 3", "enriched_content": "Enriched"}

    async def classify(self, handle, **options):
        self._record("classify", handle, **options)
        return {"vertical": "clothing"}

    async def generate_seo_content(self, handle, **options):
        self._record("generate_seo_content", handle, **options)
        return {"metaTitle": "SEO Title"}


class FakeCollectionProducts(_Recorder):
    async def all(self, handle, *, currency=None):
        self._record("all", handle, currency=currency)
        return [{"id": "p1", "title": "Col Product 1"}]

    async def paginated(self, handle, *, page=None, limit=None, currency=None):
        self._record("paginated", handle, page=page, limit=limit, currency=currency)
        return [{"id": "p1", "title": "Col Product 1"}]

    async def slugs(self, handle):
        self._record("slugs", handle)
        return ["p1-slug"]


class FakeCollections(_Recorder):
    def __init__(self, calls: list, prefix: str):
        super().__init__(calls, prefix)
        self.products = FakeCollectionProducts(calls, f"{prefix}products.")

    async def all(self):
        self._record("all")
        return [{"id": "c1", "title": "Collection 1"}]

    async def paginated(self, *, page=None, limit=None):
        self._record("paginated", page=page, limit=limit)
        return [{"id": "c1", "title": "Collection 1"}]

    async def showcased(self):
        self._record("showcased")
        return [{"id": "c2", "title": "Showcased Collection"}]

    async def find(self, handle):
        self._record("find", handle)
        if handle == "exists":
            return {"id": "c3", "title": "Collection 3"}
        return None


class FakeCheckout(_Recorder):
    def create_url(self, payload):
        self._record("create_url", payload)
        return "https://checkout.url"


class FakeUtils(_Recorder):
    def sanitize_domain(self, domain, *, strip_www=False):
        d = re.sub(r"^\w+://", "", str(domain).strip().lower())
        d = re.sub(r"/.*$", "", d)
        d = re.sub(r":\d+$", "", d)
        if strip_www:
            d = re.sub(r"^www\.", "", d)
        return d

    def generate_store_slug(self, domain):
        return re.sub(r"\W+", "-", domain).lower()

    def gen_product_slug(self, *, handle, store_domain):
        return re.sub(r"\W+", "-", f"{store_domain}-{handle}").lower()

    async def detect_shop_country(self, html):
        self._record("detect_shop_country", html)
        country = "US" if "en-US" in html else None
        return {"country": country, "confidence": 0.9 if country else 0.0}


class FakeShopClient:
    """Storefront client double bound to one domain."""

    def __init__(self, domain, options=None, calls=None):
        self.domain = domain
        self.options = options
        self.calls = calls if calls is not None else []
        self.info_cache_cleared = 0
        self.products = FakeProducts(self.calls, "products.")
        self.collections = FakeCollections(self.calls, "collections.")
        self.checkout = FakeCheckout(self.calls, "checkout.")
        self.utils = FakeUtils(self.calls, "utils.")

    async def get_info(self, *, force=None):
        self.calls.append(("get_info", (), {"force": force}))
        return {"name": "Mock Store", "domain": SHOP_DOMAIN, "country": "US"}

    def clear_info_cache(self):
        self.calls.append(("clear_info_cache", (), {}))
        self.info_cache_cleared += 1

    async def determine_store_type(self, **options):
        self.calls.append(("determine_store_type", (), options))
        return {"vertical": "clothing", "audience": "adult_male"}


class FakeShopClientFactory:
    """Client factory that keeps every client it builds and one shared call log."""

    def __init__(self):
        self.clients: list[FakeShopClient] = []
        self.calls: list[tuple] = []

    def __call__(self, domain, options):
        client = FakeShopClient(domain, options, self.calls)
        self.clients.append(client)
        return client

    def call_names(self) -> list[str]:
        return [name for name, _, _ in self.calls]

    def last_call(self, name: str) -> tuple[tuple, dict]:
        for call_name, args, kwargs in reversed(self.calls):
            if call_name == name:
                return args, kwargs
        raise AssertionError(f"{name} was never called; calls: {self.call_names()}")
