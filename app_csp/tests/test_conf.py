# app_csp/tests/test_conf.py
import pytest
from django.core.exceptions import ImproperlyConfigured

from app_csp.conf import CSPOptions, get_options, report_path
from app_csp.policy import render_policy


def test_defaults():
    opts = CSPOptions.merge()
    assert opts.log_tags == ("content-security-policy-report",)
    assert opts.varieties_to_include == ("view",)
    assert dict(opts.fetch_directives) == {
        "default-src": ("https:",),
        "report-uri": "http://localhost/csp_reports",
    }
    assert opts.header_key == "Content-Security-Policy-Report-Only"
    assert opts.policy_header_key == "Content-Security-Policy"
    assert opts.policy_header == "upgrade-insecure-requests;"
    assert opts.report_errors and opts.upgrade_insecure_requests
    assert opts.https_only is False


def test_fetch_directives_merged_over_defaults():
    opts = CSPOptions.merge({"fetch_directives": {"font-src": "https:"}})
    assert dict(opts.fetch_directives) == {
        "default-src": ("https:",),
        "report-uri": "http://localhost/csp_reports",
        "font-src": "https:",
    }
    # report-uri по умолчанию сохранился, маршрут отчётов не пропадает
    assert opts.report_path == "/csp_reports"


def test_fetch_directives_override_keeps_default_position():
    opts = CSPOptions.merge({"fetch_directives": {"font-src": "https:", "default-src": "self"}})
    assert list(opts.fetch_directives) == ["default-src", "report-uri", "font-src"]
    assert opts.fetch_directives["default-src"] == "self"


def test_default_directive_removed_with_none_or_empty_list():
    opts = CSPOptions.merge({"fetch_directives": {"report-uri": None, "default-src": []}})
    assert opts.report_path is None
    assert render_policy(opts.fetch_directives) == ""


def test_lists_are_frozen():
    src = {"default-src": ["https:"]}
    opts = CSPOptions.merge({"fetch_directives": src, "varieties_to_include": ["plain"], "log_tags": "csp"})
    src["default-src"].append("data:")
    assert opts.fetch_directives["default-src"] == ("https:",)
    assert opts.varieties_to_include == ("plain",)
    assert opts.log_tags == ("csp",)
    with pytest.raises(TypeError):
        opts.fetch_directives["img-src"] = "https:"


def test_unknown_key_is_rejected():
    with pytest.raises(ImproperlyConfigured):
        CSPOptions.merge({"httpsOnly": True})


def test_fetch_directives_must_be_mapping():
    with pytest.raises(ImproperlyConfigured):
        CSPOptions.merge({"fetch_directives": ["default-src https:"]})


@pytest.mark.parametrize("uri,expected", [
    ("http://localhost/csp_reports", "/csp_reports"),
    ("https://example.com:8443/report?x=1", "/report"),
    ("/csp_reports", "/csp_reports"),
    ("http://example.com", "/"),
])
def test_report_path(uri, expected):
    opts = CSPOptions.merge({"fetch_directives": {"report-uri": uri}})
    assert report_path(opts) == expected


def test_get_options_follows_settings(settings):
    settings.CSP_PLUGIN = {"https_only": True}
    assert get_options().https_only is True
    settings.CSP_PLUGIN = {"https_only": False}
    assert get_options().https_only is False


def test_get_options_rejects_non_mapping(settings):
    settings.CSP_PLUGIN = ["https_only"]
    with pytest.raises(ImproperlyConfigured):
        get_options()
