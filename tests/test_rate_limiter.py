"""
Tests for the rate limiter key function.
"""

from starlette.requests import Request

from catalog.services.rate_limiter import get_client_ip, limiter


def make_request(headers=(), client=("10.0.0.5", 5000)):
    return Request(
        {
            "type": "http",
            "method": "POST",
            "path": "/catalog/genre/create",
            "headers": [(k.lower().encode(), v.encode()) for k, v in headers],
            "client": client,
        }
    )


class TestClientIp:
    def test_direct_connection(self):
        assert get_client_ip(make_request()) == "10.0.0.5"

    def test_forwarded_for_uses_first_address(self):
        request = make_request([("X-Forwarded-For", "203.0.113.7, 10.0.0.1")])
        assert get_client_ip(request) == "203.0.113.7"

    def test_real_ip(self):
        request = make_request([("X-Real-IP", " 198.51.100.2 ")])
        assert get_client_ip(request) == "198.51.100.2"


def test_limiter_disabled_in_tests():
    assert limiter.enabled is False
