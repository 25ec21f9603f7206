from typing import Any, Dict, Iterable, Optional

from httpx import codes as status


class APIException(Exception):
    """
    Base exception for API errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        status_code: int = status.INTERNAL_SERVER_ERROR,
        detail: str = "An unexpected error occurred",
        code: str = "internal_error",
        context: Optional[Dict[str, Any]] = None
    ):
        self.status_code = status_code
        self.detail = detail
        self.code = code
        self.context = context or {}
        super().__init__(self.detail)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary for consistent response format."""
        return {
            "error": {
                "code": self.code,
                "message": self.detail,
                "status_code": self.status_code,
                "context": self.context
            }
        }


class ValidationException(APIException):
    """Exception raised when data validation fails."""

    def __init__(
        self,
        detail: str = "Validation error",
        code: str = "validation_error",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        merged_context = {"field": field} if field else {}
        if context:
            merged_context.update(context)

        super().__init__(
            status_code=status.UNPROCESSABLE_ENTITY,
            detail=detail,
            code=code,
            context=merged_context
        )


class ResponseSerializationError(APIException):
    """
    Base exception for failures while turning a response body into a value.

    Carries the response and the raw body so callers can inspect what the
    server actually sent.
    """

    def __init__(
        self,
        detail: str = "Response could not be serialized",
        code: str = "serialization_error",
        response: Any = None,
        data: Any = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(
            status_code=status.BAD_GATEWAY,
            detail=detail,
            code=code,
            context=context
        )
        self.response = response
        self.data = data
        self.cause = cause

        # Add original exception info to context if available
        if cause is not None:
            self.context["original_error"] = str(cause)


class ParseError(ResponseSerializationError):
    """Exception raised when a response body is not valid JSON."""

    def __init__(
        self,
        detail: str = "Response body is not valid JSON",
        response: Any = None,
        data: Any = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(
            detail=detail,
            code="parse_error",
            response=response,
            data=data,
            context=context,
            cause=cause
        )


class UnacceptableContentTypeError(ResponseSerializationError):
    """Exception raised when the declared content type is not accepted."""

    def __init__(
        self,
        content_type: Optional[str],
        acceptable_content_types: Iterable[str],
        response: Any = None,
        data: Any = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(
            detail=f"Request failed: unacceptable content-type: {content_type}",
            code="unacceptable_content_type",
            response=response,
            data=data,
            context={
                "content_type": content_type,
                "acceptable_content_types": sorted(acceptable_content_types),
            },
            cause=cause
        )
        self.content_type = content_type


class UnacceptableStatusCodeError(ResponseSerializationError):
    """Exception raised when the response status is outside the accepted set."""

    def __init__(
        self,
        response_status: int,
        response: Any = None,
        data: Any = None,
        cause: Optional[Exception] = None
    ):
        try:
            reason = status.get_reason_phrase(response_status)
        except (TypeError, ValueError):
            reason = ""
        detail = f"Request failed: {reason} ({response_status})" if reason else f"Request failed: {response_status}"
        super().__init__(
            detail=detail,
            code="unacceptable_status_code",
            response=response,
            data=data,
            context={"status_code": response_status},
            cause=cause
        )
        self.response_status = response_status
        # Decoded error payload, when the body was valid JSON
        self.body: Any = None


class SerializerNotFoundError(APIException):
    """Exception raised when a serializer type is not registered."""

    def __init__(
        self,
        detail: str = "Serializer not found",
        code: str = "serializer_not_found",
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            status_code=status.NOT_FOUND,
            detail=detail,
            code=code,
            context=context
        )


class SerializerConfigError(APIException):
    """Exception raised when a serializer configuration is invalid."""

    def __init__(
        self,
        detail: str = "Invalid serializer configuration",
        code: str = "serializer_config_error",
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            status_code=status.UNPROCESSABLE_ENTITY,
            detail=detail,
            code=code,
            context=context
        )
