"""
Builders for in-memory HTTP responses.
"""

import json
from typing import Any, Dict, Optional

import httpx
import requests

JSON_HEADERS = {"Content-Type": "application/json; charset=utf-8"}
ACTIVITIES_URL = "https://api.soundcloud.com/me/activities"


def _encode(body: Any) -> bytes:
    if isinstance(body, (dict, list)):
        return json.dumps(body).encode("utf-8")
    if isinstance(body, str):
        return body.encode("utf-8")
    return body


def make_response(
    body: Any = b"",
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
) -> httpx.Response:
    """Build an httpx response; dicts and lists are JSON encoded."""
    return httpx.Response(
        status_code,
        headers=JSON_HEADERS if headers is None else headers,
        content=_encode(body),
        request=httpx.Request("GET", ACTIVITIES_URL),
    )


def make_requests_response(
    body: Any = b"",
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
) -> requests.Response:
    """Build a requests response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response.headers.update(JSON_HEADERS if headers is None else headers)
    response._content = _encode(body)
    response.url = ACTIVITIES_URL
    return response
