from typing import Any, Optional, TypedDict, Union

from pydantic import BaseModel, ConfigDict
from requests import Response


class ErrorMessage(TypedDict):
    """TypedDict to defining error message format"""

    error: str


class APIErrorBody(BaseModel):
    """Error payload returned by the Openbank API on non-2xx responses."""

    model_config = ConfigDict(extra='allow')

    type: Optional[str] = None
    message: Optional[str] = None
    reason: Optional[Any] = None


class OpenbankException(Exception):
    """Base class for every error raised by this package"""

    def __init__(
        self,
        message: Union[ErrorMessage, str],
        response: Optional[Response] = None,
    ):
        self.message: Union[ErrorMessage, str] = message
        self.response: Optional[Response] = response
        super().__init__(message)

    @property
    def status_code(self) -> Optional[int]:
        return getattr(self.response, 'status_code', None)


class InvalidIdempotencyKeyException(OpenbankException):
    """Raised before any network I/O, so there is never a response attached."""

    def __init__(self, max_size: int):
        self.max_size: int = max_size
        super().__init__(
            message=ErrorMessage(
                error=f'invalid idempotency key: longer than {max_size} bytes'
            )
        )


class APIException(OpenbankException):
    """The server answered with a non-success HTTP status."""

    def __init__(self, response: Response, error: Optional[APIErrorBody] = None):
        self.error: Optional[APIErrorBody] = error
        detail = error.message if error and error.message else response.reason
        super().__init__(
            message=ErrorMessage(
                error=f'{response.url}: {response.status_code} {detail}'
            ),
            response=response,
        )


class DecodeException(OpenbankException):
    """The server accepted the request but the body does not match the schema."""

    def __init__(
        self,
        response: Response,
        model_name: str,
        errors: Optional[list[dict[str, Any]]] = None,
    ):
        self.model_name: str = model_name
        self.errors: list[dict[str, Any]] = errors or []
        super().__init__(
            message=ErrorMessage(
                error=f'could not decode response body into {model_name}'
            ),
            response=response,
        )
