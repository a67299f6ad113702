# app_csp/tests/test_csp_header.py
from django.test import override_settings
from django.urls import reverse

from .base import CSPTestCase, ENFORCE, REPORT_ONLY


class CSPHeaderTests(CSPTestCase):
    def test_header_on_template_page(self):
        r = self.client.get(reverse("home"))
        self.assertEqual(r.status_code, 200)
        self.assertHasCSP(r)
        self.assertEqual(
            r.headers[REPORT_ONLY],
            "default-src https:;report-uri http://localhost:8000/csp_reports;img-src https:",
        )

    def test_no_header_on_plain_response(self):
        r = self.client.get(reverse("plain"))
        self.assertEqual(r.status_code, 200)
        self.assertNoCSP(r)

    def test_forced_route_ignores_variety(self):
        r = self.client.get(reverse("forced"))
        self.assertEqual(r.status_code, 200)
        self.assertHasCSP(r)

    def test_render_view_marked_as_view(self):
        r = self.client.get(reverse("rendered"))
        self.assertEqual(r.status_code, 200)
        self.assertHasCSP(r)

    @override_settings(CSP_PLUGIN={"varieties_to_include": ["plain"]})
    def test_error_response_of_included_variety(self):
        r = self.client.get("/missing/")
        self.assertEqual(r.status_code, 404)
        self.assertHasCSP(r)


@override_settings(CSP_PLUGIN={"https_only": True, "varieties_to_include": ["view"]})
class HttpsOnlyTests(CSPTestCase):
    def test_plain_http_is_skipped(self):
        self.assertNoCSP(self.client.get(reverse("home")))
        self.assertNoCSP(self.client.get(reverse("forced")))

    def test_https_request(self):
        self.assertHasCSP(self.client.get(reverse("home"), secure=True))

    def test_forwarded_proto(self):
        r = self.client.get(reverse("home"), HTTP_X_FORWARDED_PROTO="https")
        self.assertHasCSP(r)

    def test_forwarded_proto_http(self):
        r = self.client.get(reverse("home"), HTTP_X_FORWARDED_PROTO="http")
        self.assertNotIn(ENFORCE, r.headers)
