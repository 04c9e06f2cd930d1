"""
TeleSign REST Client

A Python client that signs requests with the TeleSign HMAC-SHA256
authentication scheme and dispatches them to the TeleSign REST API.

Example usage:
    from telesign_rest import RestClient

    client = RestClient("your-customer-id", "your-base64-secret-key")
    response = client.get("/v1/phoneid/15555555555")
"""

from .client import RestClient, encode_fields
from .response import Response
from .signer import (
    generate_telesign_headers,
    build_string_to_sign,
    compute_signature,
    rfc2616_date,
    generate_nonce
)
from .exceptions import (
    TelesignClientError,
    ConfigurationError,
    InvalidKeyFormatError,
    EncodingError
)
from .constants import (
    AUTH_METHOD,
    DEFAULT_API_HOST,
    DEFAULT_CONFIG,
    SDK_VERSION
)

__version__ = SDK_VERSION
__all__ = [
    "RestClient",
    "Response",
    "encode_fields",
    "generate_telesign_headers",
    "build_string_to_sign",
    "compute_signature",
    "rfc2616_date",
    "generate_nonce",
    "TelesignClientError",
    "ConfigurationError",
    "InvalidKeyFormatError",
    "EncodingError",
    "AUTH_METHOD",
    "DEFAULT_API_HOST",
    "DEFAULT_CONFIG",
    "SDK_VERSION"
]
