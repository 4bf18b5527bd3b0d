"""Tests for the root endpoint, JSON error pages and request logging."""

from __future__ import annotations

from django.test import TestCase


class CoreViewTests(TestCase):
    def test_api_root(self) -> None:
        response = self.client.get("/")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["message"], "Trip Holiday API Server")
        self.assertEqual(body["endpoints"]["packages"], "/api/packages")

    def test_healthz(self) -> None:
        response = self.client.get("/healthz")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "healthy")

    def test_unknown_route_returns_json(self) -> None:
        response = self.client.get("/api/nowhere")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"success": False, "message": "Route not found"})

    def test_request_id_is_echoed(self) -> None:
        response = self.client.get("/", HTTP_X_REQUEST_ID="req-123")

        self.assertEqual(response["X-Request-ID"], "req-123")

    def test_request_id_is_generated(self) -> None:
        response = self.client.get("/")

        self.assertEqual(len(response["X-Request-ID"]), 32)

    def test_oversized_request_id_is_replaced(self) -> None:
        response = self.client.get("/", HTTP_X_REQUEST_ID="a" * 65)

        self.assertEqual(len(response["X-Request-ID"]), 32)
        self.assertNotEqual(response["X-Request-ID"], "a" * 65)

    def test_malformed_request_id_is_replaced(self) -> None:
        response = self.client.get("/", HTTP_X_REQUEST_ID="bad id\tvalue")

        self.assertRegex(response["X-Request-ID"], r"^[0-9a-f]{32}$")
