from .hooks import (
    async_httpx_response_hook,
    deserialize,
    httpx_response_hook,
    requests_response_hook,
)

__all__ = [
    "deserialize",
    "httpx_response_hook",
    "async_httpx_response_hook",
    "requests_response_hook",
]
