from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from requests import Response
from requests.structures import CaseInsensitiveDict

ValueType = TypeVar('ValueType')


@dataclass(frozen=True)
class APIResult(Generic[ValueType]):
    """
    Successful outcome of a service call.

    Failures never produce an APIResult: they are raised as
    OpenbankException subclasses, which carry the response when one exists.

    Attributes:
        value: The decoded body, None for operations without a typed body.
        response: The HTTP response the value was decoded from.
    """

    value: Optional[ValueType]
    response: Response

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def headers(self) -> CaseInsensitiveDict[str]:
        return self.response.headers
