"""
Constants for the TeleSign REST client.
Header names and signing markers must match what the TeleSign API recomputes.
"""

# Authentication headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_DATE = "Date"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_AUTH_METHOD = "x-ts-auth-method"
HEADER_NONCE = "x-ts-nonce"
HEADER_USER_AGENT = "User-Agent"

AUTH_METHOD = "HMAC-SHA256"
AUTHORIZATION_SCHEME = "TSA"
FORM_URLENCODED = "application/x-www-form-urlencoded"

# Methods whose fields travel in the request body (and are signed)
BODY_METHODS = ("POST", "PUT")

SDK_VERSION = "1.0.0"

DEFAULT_API_HOST = "https://rest.telesign.com"

# Default configuration values
DEFAULT_CONFIG = {
    'timeout': 10,       # seconds to wait for the server
    'proxy': None,       # proxy URL for http and https
    'transport': None,   # requests adapter override
    'session': None,     # pre-built requests.Session
}
