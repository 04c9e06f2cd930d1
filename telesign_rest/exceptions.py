"""
Custom exceptions for the TeleSign REST client.

Transport failures are not represented here: they surface as the
``requests`` exceptions raised by the underlying session.
"""


class TelesignClientError(Exception):
    """Base exception for TeleSign client errors."""
    pass


class ConfigurationError(TelesignClientError):
    """Raised when client configuration is invalid."""
    pass


class InvalidKeyFormatError(TelesignClientError):
    """Raised when the secret key is not valid base64."""
    pass


class EncodingError(TelesignClientError):
    """Raised when request fields cannot be form-urlencoded."""
    pass
