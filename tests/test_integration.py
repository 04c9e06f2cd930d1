"""
Integration tests against the live TeleSign REST API.

Skipped unless TELESIGN_CUSTOMER_ID and TELESIGN_SECRET_KEY are set.
"""

import os

import pytest

from telesign_rest import RestClient


class TestIntegration:
    """Integration tests with the TeleSign REST API."""
    CUSTOMER_ID = os.environ.get("TELESIGN_CUSTOMER_ID")
    SECRET_KEY = os.environ.get("TELESIGN_SECRET_KEY")
    API_HOST = os.environ.get("TELESIGN_API_HOST", "https://rest.telesign.com")
    PHONE_NUMBER = os.environ.get("TELESIGN_PHONE_NUMBER", "15555555555")

    @pytest.fixture
    def client(self):
        """Create authenticated client."""
        if not (self.CUSTOMER_ID and self.SECRET_KEY):
            pytest.skip("TELESIGN_CUSTOMER_ID and TELESIGN_SECRET_KEY not set")

        with RestClient(self.CUSTOMER_ID, self.SECRET_KEY, self.API_HOST) as client:
            yield client

    def test_signed_post_is_accepted(self, client):
        """Test the server accepts the signature of a POST request."""
        response = client.post(f"/v1/phoneid/{self.PHONE_NUMBER}", {"account_lifecycle_event": "create"})

        assert response.status_code != 401
        assert response.json is not None

    def test_signed_get_is_accepted(self, client):
        """Test the server accepts the signature of a GET request."""
        response = client.get("/v1/messaging/0123456789ABCDEF0123456789ABCDEF")

        assert response.status_code != 401

    def test_wrong_key_is_rejected(self):
        """Test a valid but wrong key yields 401 rather than an exception."""
        if not self.CUSTOMER_ID:
            pytest.skip("TELESIGN_CUSTOMER_ID not set")

        client = RestClient(self.CUSTOMER_ID, "d3Jvbmcta2V5", self.API_HOST)
        response = client.get("/v1/messaging/0123456789ABCDEF0123456789ABCDEF")

        assert response.status_code == 401
        assert response.ok is False
