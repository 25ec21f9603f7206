"""
JSON response serializer.

Validates response metadata (status code and declared content type) and
decodes the body as JSON. This is the reusable base that other serializers
compose.
"""

import codecs
import json
from typing import Any, Callable, Iterable, Optional, Tuple, Union

from stream_adaptor.adapters.interfaces.serializer import DataFormat, ResponseLike, ResponseSerializer
from stream_adaptor.core.config import get_settings
from stream_adaptor.core.exceptions import (
    ParseError,
    UnacceptableContentTypeError,
    UnacceptableStatusCodeError,
)
from stream_adaptor.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CHARSET = "utf-8"

# Marks a constructor argument that should come from settings
_FROM_SETTINGS: Any = object()


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are accepted by the json module but are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def parse_content_type(header: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """
    Split a Content-Type header into its media type and charset.

    Args:
        header: Raw header value, e.g. "application/json; charset=utf-8"

    Returns:
        Tuple of lowercased media type (or None) and charset (or None)
    """
    if not header:
        return None, None

    parts = header.split(";")
    media_type = parts[0].strip().lower() or None
    charset = None
    for param in parts[1:]:
        name, _, value = param.partition("=")
        if name.strip().lower() == "charset":
            charset = value.strip().strip('"').strip("'") or None
    return media_type, charset


def remove_keys_with_null_values(value: Any) -> Any:
    """
    Drop dictionary entries whose value is None, at any depth.

    Lists are walked so that objects inside arrays are cleaned too.
    """
    if isinstance(value, dict):
        return {
            key: remove_keys_with_null_values(item)
            for key, item in value.items()
            if item is not None
        }
    if isinstance(value, list):
        return [remove_keys_with_null_values(item) for item in value]
    return value


class JSONResponseSerializer(ResponseSerializer):
    """
    Serializer that validates a response and decodes its body as JSON.

    Responses are accepted when their status code falls in
    acceptable_status_codes and their declared media type is one of
    acceptable_content_types. Passing None for either disables that check.
    """

    def __init__(
        self,
        acceptable_content_types: Optional[Iterable[str]] = _FROM_SETTINGS,
        acceptable_status_codes: Optional[Iterable[int]] = _FROM_SETTINGS,
        removes_keys_with_null_values: bool = _FROM_SETTINGS,
        parse_float: Optional[Callable[[str], Any]] = None,
    ):
        """
        Initialize the serializer.

        Args:
            acceptable_content_types: Media types accepted, None to accept any
            acceptable_status_codes: Status codes accepted, None to accept any
            removes_keys_with_null_values: Whether null-valued keys are dropped
            parse_float: Optional float parser forwarded to json.loads
        """
        settings = get_settings()

        if acceptable_content_types is _FROM_SETTINGS:
            acceptable_content_types = settings.acceptable_content_types
        if acceptable_status_codes is _FROM_SETTINGS:
            acceptable_status_codes = settings.acceptable_status_codes
        if removes_keys_with_null_values is _FROM_SETTINGS:
            removes_keys_with_null_values = settings.REMOVES_KEYS_WITH_NULL_VALUES

        self._acceptable_content_types = (
            frozenset(t.lower() for t in acceptable_content_types)
            if acceptable_content_types is not None else None
        )
        self._acceptable_status_codes = (
            frozenset(acceptable_status_codes)
            if acceptable_status_codes is not None else None
        )
        self._removes_keys_with_null_values = bool(removes_keys_with_null_values)
        self._parse_float = parse_float

    @property
    def acceptable_content_types(self) -> Optional[frozenset]:
        return self._acceptable_content_types

    @property
    def acceptable_status_codes(self) -> Optional[frozenset]:
        return self._acceptable_status_codes

    @property
    def removes_keys_with_null_values(self) -> bool:
        return self._removes_keys_with_null_values

    def supports_data_format(self, data_format: DataFormat) -> bool:
        return data_format == DataFormat.JSON

    def validate_response(self, response: Optional[ResponseLike], data: Optional[Union[bytes, str]]) -> None:
        """
        Check a response's status code and declared content type.

        Empty bodies are exempt from the content type check. When both checks
        fail, the status code error is raised with the content type error as
        its cause.

        Args:
            response: Response metadata, or None to skip validation
            data: Raw response body

        Raises:
            UnacceptableContentTypeError: If the content type is not accepted
            UnacceptableStatusCodeError: If the status code is not accepted
        """
        if response is None:
            return

        content_type_error = None
        if self._acceptable_content_types is not None and data:
            media_type, _ = parse_content_type(response.headers.get("content-type"))
            if media_type not in self._acceptable_content_types:
                content_type_error = UnacceptableContentTypeError(
                    content_type=media_type,
                    acceptable_content_types=self._acceptable_content_types,
                    response=response,
                    data=data,
                )

        if self._acceptable_status_codes is not None and response.status_code not in self._acceptable_status_codes:
            logger.warning(
                f"Unacceptable response status code: {response.status_code}",
                extra={"serializer": type(self).__name__, "status_code": response.status_code},
            )
            raise UnacceptableStatusCodeError(
                response_status=response.status_code,
                response=response,
                data=data,
                cause=content_type_error,
            )

        if content_type_error is not None:
            logger.warning(
                f"Unacceptable response content type: {content_type_error.content_type}",
                extra={"serializer": type(self).__name__, "content_type": content_type_error.content_type},
            )
            raise content_type_error

    def serialize(self, data: Optional[Union[bytes, str]], response: Optional[ResponseLike] = None) -> Any:
        """
        Validate the response and decode its body as JSON.

        A status code error still decodes the body when the content type is
        acceptable, so the server's error payload is available on the raised
        exception as its `body` attribute.

        Args:
            data: Raw response body
            response: Response metadata, if any

        Returns:
            Any: Decoded JSON value, or None for an empty or blank body

        Raises:
            UnacceptableContentTypeError: If the content type is not accepted
            UnacceptableStatusCodeError: If the status code is not accepted
            ParseError: If the body is not valid JSON
        """
        status_error = None
        try:
            self.validate_response(response, data)
        except UnacceptableStatusCodeError as e:
            if isinstance(e.cause, UnacceptableContentTypeError):
                raise
            status_error = e

        try:
            value = self._decode(data, response)
        except ParseError as e:
            if status_error is None:
                raise
            status_error.cause = e
            status_error.context["original_error"] = str(e)
            raise status_error from e

        if status_error is not None:
            status_error.body = value
            raise status_error

        return value

    def _decode(self, data: Optional[Union[bytes, str]], response: Optional[ResponseLike]) -> Any:
        """Decode body bytes to text, then text to a JSON value."""
        if data is None:
            return None

        if isinstance(data, (bytes, bytearray)):
            charset = DEFAULT_CHARSET
            if response is not None:
                _, declared = parse_content_type(response.headers.get("content-type"))
                if declared:
                    charset = declared
            try:
                codecs.lookup(charset)
            except LookupError:
                logger.warning(f"Unknown response charset '{charset}', falling back to {DEFAULT_CHARSET}")
                charset = DEFAULT_CHARSET
            try:
                text = bytes(data).decode(charset)
            except UnicodeDecodeError as e:
                logger.error(f"Response body is not valid {charset} text")
                raise ParseError(
                    detail=f"Response body could not be decoded as {charset}",
                    response=response,
                    data=data,
                    cause=e,
                ) from e
        else:
            text = data

        # Servers answering with an empty 200 sometimes send a single space
        if not text.strip():
            return None

        try:
            value = json.loads(text, parse_float=self._parse_float, parse_constant=_reject_constant)
            if self._removes_keys_with_null_values:
                value = remove_keys_with_null_values(value)
        except ValueError as e:
            logger.error(f"Failed to parse JSON response: {str(e)}", extra={"serializer": type(self).__name__})
            raise ParseError(response=response, data=data, cause=e) from e
        except RecursionError as e:
            logger.error("JSON response is nested too deeply", extra={"serializer": type(self).__name__})
            raise ParseError(
                detail="Response body is nested too deeply",
                response=response,
                data=data,
                cause=e,
            ) from e

        logger.debug(f"Decoded JSON response of type {type(value).__name__}")
        return value
