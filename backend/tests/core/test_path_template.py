"""Path Templates: parsing, matching and specificity ordering.

Tests cover:
    - Literal and parameterized segments match by position
    - Segment count must agree; trailing slashes ignored
    - Captured values are URL-decoded
    - Literal segments sort before parameters
    - OpenAPI rendering of `:param`
"""

import pytest

from storefront_api.core.path_template import PathTemplate, split_path


def test_split_path_ignores_empty_segments():
    assert split_path("/products//all/") == ("products", "all")
    assert split_path("/") == ()


def test_literal_template_matches_exact_path():
    template = PathTemplate.parse("/products/all")
    assert template.match(split_path("/products/all")) == {}
    assert template.match(split_path("/products/all/")) == {}
    assert template.match(split_path("/products/other")) is None


def test_param_template_captures_named_segment():
    template = PathTemplate.parse("/collections/:handle/products/paginated")
    params = template.match(split_path("/collections/summer/products/paginated"))
    assert params == {"handle": "summer"}
    assert template.param_names == ("handle",)


def test_segment_count_must_match():
    template = PathTemplate.parse("/products/:handle")
    assert template.match(split_path("/products")) is None
    assert template.match(split_path("/products/a/enriched")) is None


def test_captured_values_are_url_decoded():
    template = PathTemplate.parse("/products/:handle")
    assert template.match(split_path("/products/caf%C3%A9-mug")) == {"handle": "café-mug"}


def test_captured_values_decoded_exactly_once():
    template = PathTemplate.parse("/products/:handle")
    assert template.match(split_path("/products/a%2541")) == {"handle": "a%41"}


def test_encoded_slash_stays_in_one_segment():
    template = PathTemplate.parse("/products/:handle")
    assert template.match(split_path("/products/a%2Fb")) == {"handle": "a/b"}


def test_encoded_literal_segment_matches():
    template = PathTemplate.parse("/products/paginated")
    assert template.match(split_path("/products/pagin%61ted")) == {}


def test_literal_segments_sort_before_params():
    literal = PathTemplate.parse("/products/paginated")
    param = PathTemplate.parse("/products/:handle")
    assert literal.specificity() < param.specificity()


def test_to_openapi_renders_braces():
    template = PathTemplate.parse("/collections/:handle/slugs")
    assert template.to_openapi() == "/collections/{handle}/slugs"


def test_parse_rejects_relative_path():
    with pytest.raises(ValueError):
        PathTemplate.parse("products/all")


def test_parse_rejects_unnamed_param():
    with pytest.raises(ValueError):
        PathTemplate.parse("/products/:")
