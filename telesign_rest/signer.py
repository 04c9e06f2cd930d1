"""
TeleSign request signing.

Builds the canonical string-to-sign and the authentication headers used by
the TeleSign REST API. The server recomputes the same string byte for byte,
so the layout produced by ``build_string_to_sign`` must not change.

See https://developer.telesign.com/docs/authentication-1
"""

import base64
import binascii
import hashlib
import hmac
import uuid
from email.utils import formatdate
from typing import Dict, Optional

from .constants import (
    AUTH_METHOD,
    AUTHORIZATION_SCHEME,
    BODY_METHODS,
    FORM_URLENCODED,
    HEADER_AUTHORIZATION,
    HEADER_DATE,
    HEADER_CONTENT_TYPE,
    HEADER_AUTH_METHOD,
    HEADER_NONCE,
    HEADER_USER_AGENT
)
from .exceptions import InvalidKeyFormatError


def rfc2616_date() -> str:
    """Current UTC time as an RFC 2616 HTTP-date, e.g. 'Fri, 01 Jan 2021 00:00:00 GMT'."""
    return formatdate(usegmt=True)


def generate_nonce() -> str:
    """Fresh version 4 UUID string."""
    return str(uuid.uuid4())


def content_type_for(method_name: str) -> str:
    """Content type signed and sent for the given method ('' unless POST/PUT)."""
    return FORM_URLENCODED if method_name in BODY_METHODS else ""


def build_string_to_sign(method_name: str, resource: str, url_encoded_fields: str,
                         date_rfc2616: str, nonce: str) -> str:
    """
    Build the canonicalized string-to-sign.

    Args:
        method_name: HTTP method, one of 'POST', 'GET', 'PUT' or 'DELETE'
        resource: Partial resource URI, used verbatim
        url_encoded_fields: Form-urlencoded fields
        date_rfc2616: Request date in RFC 2616 format
        nonce: Unique nonce for the request

    Returns:
        The exact text the HMAC is computed over
    """
    content_type = content_type_for(method_name)

    parts = [
        method_name,
        f"\n{content_type}",
        f"\n{date_rfc2616}",
        f"\nx-ts-auth-method:{AUTH_METHOD}",
        f"\nx-ts-nonce:{nonce}"
    ]

    # Fields are only part of the signed content when they travel in the body
    if content_type:
        parts.append(f"\n{url_encoded_fields}")

    parts.append(f"\n{resource}")

    return "".join(parts)


def compute_signature(secret_key: str, string_to_sign: str) -> str:
    """
    Generate the base64 HMAC-SHA256 signature of a string-to-sign.

    Args:
        secret_key: Base64-encoded secret key
        string_to_sign: Canonical request text

    Returns:
        Base64-encoded raw HMAC digest

    Raises:
        InvalidKeyFormatError: If secret_key is not valid base64
    """
    try:
        key = base64.b64decode(secret_key, validate=True)
    except (binascii.Error, ValueError, TypeError) as e:
        raise InvalidKeyFormatError(f"secret_key is not valid base64: {e}") from e

    mac = hmac.new(
        key,
        string_to_sign.encode('utf-8'),
        hashlib.sha256
    )
    return base64.b64encode(mac.digest()).decode('ascii')


def generate_telesign_headers(customer_id: str,
                              secret_key: str,
                              method_name: str,
                              resource: str,
                              url_encoded_fields: str,
                              date_rfc2616: Optional[str] = None,
                              nonce: Optional[str] = None,
                              user_agent: Optional[str] = None) -> Dict[str, str]:
    """
    Generate the TeleSign REST API headers used to authenticate a request.

    Args:
        customer_id: Account customer id
        secret_key: Account secret key (base64)
        method_name: HTTP method, one of 'POST', 'GET', 'PUT' or 'DELETE'
        resource: Partial resource URI the request targets
        url_encoded_fields: Form-urlencoded request fields
        date_rfc2616: Request date in RFC 2616 format, defaults to now
        nonce: Unique nonce for the request, defaults to a UUID v4
        user_agent: User agent to send along, omitted when not given

    Returns:
        Dict of authentication headers

    Raises:
        InvalidKeyFormatError: If secret_key is not valid base64
    """
    if not date_rfc2616:
        date_rfc2616 = rfc2616_date()

    if not nonce:
        nonce = generate_nonce()

    string_to_sign = build_string_to_sign(
        method_name, resource, url_encoded_fields, date_rfc2616, nonce
    )
    signature = compute_signature(secret_key, string_to_sign)

    headers = {
        HEADER_AUTHORIZATION: f"{AUTHORIZATION_SCHEME} {customer_id}:{signature}",
        HEADER_DATE: date_rfc2616,
        HEADER_CONTENT_TYPE: content_type_for(method_name),
        HEADER_AUTH_METHOD: AUTH_METHOD,
        HEADER_NONCE: nonce
    }

    if user_agent:
        headers[HEADER_USER_AGENT] = user_agent

    return headers
