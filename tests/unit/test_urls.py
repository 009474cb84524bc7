"""
Unit tests for URL helpers.
"""

import pytest

from transform_report.analysis.urls import (
    base_tenant_url,
    prepend_if_not_none,
    strip_relative_url_section,
)


class TestBaseTenantUrl:
    """Test reduction of site URLs to scheme and host."""

    def test_keeps_scheme_and_host(self):
        assert base_tenant_url("https://a.example.com/sites/x") == "https://a.example.com"

    def test_scheme_marker_case_insensitive(self):
        assert base_tenant_url("HTTPS://Contoso.SharePoint.com/sites/hr") == "https://contoso.sharepoint.com"

    def test_port_is_dropped(self):
        assert base_tenant_url("http://intranet:8080/sites/x") == "http://intranet"

    @pytest.mark.parametrize("value", [None, "", "/sites/x", "contoso.sharepoint.com/sites/x"])
    def test_relative_or_unset_is_empty(self, value):
        assert base_tenant_url(value) == ""

    @pytest.mark.parametrize("value", ["https://", "https://[::1/sites", "see https:// later"])
    def test_malformed_is_empty(self, value):
        assert base_tenant_url(value) == ""


def test_prepend_if_not_none():
    assert prepend_if_not_none("/sites/x/page.aspx", "https://a.example.com") == "https://a.example.com/sites/x/page.aspx"
    assert prepend_if_not_none(None, "https://a.example.com") == ""
    assert prepend_if_not_none("/p.aspx", "") == "/p.aspx"


@pytest.mark.parametrize(
    "value,expected",
    [
        ("/sites/x/SitePages/page1.aspx", "page1.aspx"),
        ("page1.aspx", "page1.aspx"),
        ("/sites/x/", "x"),
        (None, ""),
        ("", ""),
    ],
)
def test_strip_relative_url_section(value, expected):
    assert strip_relative_url_section(value) == expected
