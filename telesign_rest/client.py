"""
TeleSign REST client.

Generic HTTP client that signs every request with the TeleSign HMAC scheme
and can be used against any of the TeleSign REST API endpoints.
"""

import logging
import platform
from collections.abc import Mapping
from typing import Any, Dict, Optional
from urllib.parse import urlencode, urljoin

import requests

from .constants import (
    BODY_METHODS,
    DEFAULT_API_HOST,
    DEFAULT_CONFIG,
    SDK_VERSION
)
from .exceptions import ConfigurationError, EncodingError
from .response import Response
from .signer import generate_telesign_headers

logger = logging.getLogger(__name__)

_SCALAR_TYPES = (str, bytes, int, float, bool)


def encode_fields(fields: Optional[Mapping]) -> str:
    """
    Form-urlencode request fields, keeping the caller's key order.

    List and tuple values repeat the key once per element; None values are
    skipped.

    Raises:
        EncodingError: If fields is not a mapping or holds non-scalar values
    """
    if not fields:
        return ""

    if not isinstance(fields, Mapping):
        raise EncodingError(f"fields must be a mapping, got {type(fields).__name__}")

    pairs = []
    for key, value in fields.items():
        if not isinstance(key, str):
            raise EncodingError(f"field name must be a string, got {key!r}")

        values = value if isinstance(value, (list, tuple)) else [value]
        for item in values:
            if item is None:
                continue
            if not isinstance(item, _SCALAR_TYPES):
                raise EncodingError(
                    f"field {key!r} has unsupported value type {type(item).__name__}"
                )
            pairs.append((key, item if isinstance(item, (str, bytes)) else str(item)))

    return urlencode(pairs)


class RestClient:
    """
    Client for making authenticated requests to the TeleSign REST API.

    POST and PUT send their fields form-encoded in the body; GET and DELETE
    send them in the query string. Every response, including error statuses,
    is returned as a Response.
    """

    generate_telesign_headers = staticmethod(generate_telesign_headers)

    def __init__(self, customer_id: str, secret_key: str,
                 api_host: str = DEFAULT_API_HOST, **config):
        """
        Initialize TeleSign REST client.

        Args:
            customer_id: Customer id associated with your account
            secret_key: Base64 secret key associated with your account
            api_host: Override the default API host to target another endpoint
            **config: Configuration options (timeout, proxy, transport, session)
        """
        self.customer_id = customer_id
        self.secret_key = secret_key
        self.api_host = api_host.rstrip('/')

        unknown = set(config) - set(DEFAULT_CONFIG)
        if unknown:
            raise ConfigurationError(f"unknown configuration options: {', '.join(sorted(unknown))}")

        self.config = {**DEFAULT_CONFIG, **config}
        self._validate_config()

        self.session = self.config['session'] or requests.Session()

        if self.config['transport'] is not None:
            self.session.mount('http://', self.config['transport'])
            self.session.mount('https://', self.config['transport'])

        if self.config['proxy']:
            self.session.proxies.update({
                'http': self.config['proxy'],
                'https': self.config['proxy']
            })

        self.user_agent = (
            f"TeleSignSDK/python-{SDK_VERSION} "
            f"Python/{platform.python_version()} "
            f"Requests/{requests.__version__}"
        )

    def _validate_config(self):
        """Validate client configuration."""
        if not self.customer_id:
            raise ConfigurationError("customer_id cannot be empty")

        if not self.secret_key:
            raise ConfigurationError("secret_key cannot be empty")

        timeout = self.config['timeout']
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigurationError("timeout must be a positive number of seconds")

    def execute(self, method_name: str, resource: str, fields: Optional[Mapping] = None,
                date_rfc2616: Optional[str] = None, nonce: Optional[str] = None) -> Response:
        """
        Sign and send a request to the TeleSign REST API.

        Args:
            method_name: HTTP method
            resource: Partial resource URI to perform the request against
            fields: Body or query params to perform the request with
            date_rfc2616: Request date in RFC 2616 format, defaults to now
            nonce: Unique nonce for the request, defaults to a UUID v4

        Returns:
            Response wrapping the server reply

        Raises:
            EncodingError: If fields cannot be urlencoded
            InvalidKeyFormatError: If the secret key is not valid base64
            requests.RequestException: On transport failures
        """
        url_encoded_fields = encode_fields(fields)

        headers = self.generate_telesign_headers(
            self.customer_id,
            self.secret_key,
            method_name,
            resource,
            url_encoded_fields,
            date_rfc2616,
            nonce,
            self.user_agent
        )

        url = urljoin(self.api_host + '/', resource.lstrip('/'))

        kwargs: Dict[str, Any] = {
            'headers': headers,
            'timeout': self.config['timeout']
        }
        if method_name in BODY_METHODS:
            kwargs['data'] = url_encoded_fields
            placement = 'body'
        else:
            kwargs['params'] = url_encoded_fields
            placement = 'query'

        logger.debug("%s %s (fields in %s)", method_name, url, placement)

        response = self.session.request(method_name, url, **kwargs)

        logger.debug("%s %s -> %s", method_name, url, response.status_code)

        return Response(response)

    def post(self, resource: str, fields: Optional[Mapping] = None,
             date_rfc2616: Optional[str] = None, nonce: Optional[str] = None) -> Response:
        """Make authenticated POST request, fields in the body."""
        return self.execute('POST', resource, fields, date_rfc2616, nonce)

    def get(self, resource: str, fields: Optional[Mapping] = None,
            date_rfc2616: Optional[str] = None, nonce: Optional[str] = None) -> Response:
        """Make authenticated GET request, fields in the query string."""
        return self.execute('GET', resource, fields, date_rfc2616, nonce)

    def put(self, resource: str, fields: Optional[Mapping] = None,
            date_rfc2616: Optional[str] = None, nonce: Optional[str] = None) -> Response:
        """Make authenticated PUT request, fields in the body."""
        return self.execute('PUT', resource, fields, date_rfc2616, nonce)

    def delete(self, resource: str, fields: Optional[Mapping] = None,
               date_rfc2616: Optional[str] = None, nonce: Optional[str] = None) -> Response:
        """Make authenticated DELETE request, fields in the query string."""
        return self.execute('DELETE', resource, fields, date_rfc2616, nonce)

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
