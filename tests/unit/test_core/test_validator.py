"""
Unit tests for subdomain validation
"""
import pytest

from core.validator import is_valid_subdomain, normalize_subdomain


@pytest.mark.unit
class TestIsValidSubdomain:
    """Domain-shape checks on already-normalized input"""

    @pytest.mark.parametrize("value", [
        "example.com",
        "sub.api.example.com",
        "a-b.example.io",
        "x1.y2.example.museum",
        "Sub.API.Example.COM",
        "com",
        "a" * 63 + ".example.com",
    ])
    def test_accepts_domain_shaped_strings(self, value):
        assert is_valid_subdomain(value)

    @pytest.mark.parametrize("value", [
        "",
        "not a domain",
        "sub..example.com",
        ".example.com",
        "example.com.",
        "-api.example.com",
        "api-.example.com",
        "a" * 64 + ".example.com",
        "example.123",
        "example.c",
        "example.c0m",
        "under_score.example.com",
        "example.com\n",
    ])
    def test_rejects_malformed_strings(self, value):
        assert not is_valid_subdomain(value)

    def test_non_string_is_rejected(self):
        assert is_valid_subdomain(None) is False
        assert is_valid_subdomain(42) is False


@pytest.mark.unit
class TestNormalizeSubdomain:

    def test_lowercases_trims_and_strips_trailing_dot(self):
        assert normalize_subdomain("  Sub.API.Example.COM.  ") == "sub.api.example.com"

    def test_strips_only_one_trailing_dot(self):
        assert normalize_subdomain("example.com..") == "example.com."

    def test_normalized_form_is_stable(self):
        once = normalize_subdomain("API.Example.com.")
        assert normalize_subdomain(once) == once
