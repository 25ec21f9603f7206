"""
HTTP client integration.

Lets httpx and requests clients run a response serializer on every response
they receive. Transport, retries and authentication stay with the client;
these helpers only read the body that has already arrived.
"""

from contextlib import contextmanager
from typing import Any, Awaitable, Callable, Iterator, Union

import httpx
import requests

from stream_adaptor.adapters.interfaces.serializer import ResponseSerializer
from stream_adaptor.core.logging import correlation_id, get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-Id"
DESERIALIZED_KEY = "deserialized"

HTTPResponse = Union[httpx.Response, requests.Response]


@contextmanager
def _request_id_scope(response: HTTPResponse) -> Iterator[None]:
    """Log under the response's X-Request-Id while it is deserialized."""
    request_id = response.headers.get(REQUEST_ID_HEADER)
    if not request_id:
        yield
        return
    token = correlation_id.set(request_id)
    try:
        yield
    finally:
        correlation_id.reset(token)


def deserialize(response: HTTPResponse, serializer: ResponseSerializer) -> Any:
    """
    Run a serializer over a received response.

    Args:
        response: httpx or requests response whose body has arrived
        serializer: Serializer to decode the body with

    Returns:
        Any: The deserialized body

    Raises:
        ResponseSerializationError: Whatever the serializer raises
    """
    if isinstance(response, httpx.Response):
        response.read()
    with _request_id_scope(response):
        return serializer.serialize(response.content, response)


def httpx_response_hook(serializer: ResponseSerializer) -> Callable[[httpx.Response], None]:
    """
    Build an httpx "response" event hook.

    The decoded body is stored in response.extensions["deserialized"].

    Usage:
        client = httpx.Client(event_hooks={"response": [httpx_response_hook(serializer)]})
    """

    def hook(response: httpx.Response) -> None:
        response.read()
        with _request_id_scope(response):
            logger.debug("Deserializing response", extra={"request_url": str(response.request.url)})
            response.extensions[DESERIALIZED_KEY] = serializer.serialize(response.content, response)

    return hook


def async_httpx_response_hook(serializer: ResponseSerializer) -> Callable[[httpx.Response], Awaitable[None]]:
    """Same as httpx_response_hook, for httpx.AsyncClient."""

    async def hook(response: httpx.Response) -> None:
        await response.aread()
        with _request_id_scope(response):
            logger.debug("Deserializing response", extra={"request_url": str(response.request.url)})
            response.extensions[DESERIALIZED_KEY] = serializer.serialize(response.content, response)

    return hook


def requests_response_hook(serializer: ResponseSerializer) -> Callable[..., requests.Response]:
    """
    Build a requests "response" hook.

    The decoded body is stored as response.deserialized.

    Usage:
        session.hooks["response"].append(requests_response_hook(serializer))
    """

    def hook(response: requests.Response, *args, **kwargs) -> requests.Response:
        with _request_id_scope(response):
            logger.debug("Deserializing response", extra={"request_url": response.url})
            response.deserialized = serializer.serialize(response.content, response)
        return response

    return hook
