"""
Response wrapper returned by RestClient requests.
"""

import json
from typing import Any, Optional

import requests


class Response:
    """
    Read-only view of a TeleSign REST API response.

    Error statuses are not raised; inspect ``status_code`` or ``ok``.
    """

    def __init__(self, response: requests.Response):
        self.raw = response
        self.status_code = response.status_code
        self.headers = response.headers
        self.body = response.text
        self.ok = 200 <= response.status_code < 300
        self._json = None
        self._json_loaded = False

    @property
    def json(self) -> Optional[Any]:
        """Decoded JSON body, or None when the body is not JSON."""
        if not self._json_loaded:
            try:
                self._json = json.loads(self.body)
            except ValueError:
                self._json = None
            self._json_loaded = True
        return self._json

    def __repr__(self):
        return f"<Response [{self.status_code}]>"
