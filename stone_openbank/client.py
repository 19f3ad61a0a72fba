from logging import getLogger
from typing import Any, Optional, Type, TypeVar, Union

import requests
from pydantic import BaseModel, ValidationError
from requests import (
    ConnectionError,
    HTTPError,
    Request,
    RequestException,
    Response,
    Session,
    Timeout,
)
from requests.utils import quote

from stone_openbank import settings
from stone_openbank.common.enums import HTTPMethod
from stone_openbank.common.exceptions import (
    APIErrorBody,
    APIException,
    DecodeException,
)
from stone_openbank.services.pix import IDEMPOTENCY_KEY_HEADER, PIXService

logger = getLogger(__name__)

ResponseModelType = TypeVar('ResponseModelType', bound=BaseModel)
RequestBody = Optional[Union[BaseModel, dict[str, Any]]]


class OpenbankClient:
    """
    HTTP client for the Stone Openbank API.

    Owns the base URL, the bearer token and the requests.Session whose
    connection pool is shared by every service. Services build requests
    through new_api_request and send them through do.

    Attributes:
        base_url (str): API root, without trailing slash.
        timeout (float): Default timeout in seconds, overridable per call.
        session (Session): Underlying requests session.
        pix (PIXService): PIX endpoints.

    Args:
        access_token (Optional[str]): Bearer token, STONE_OPENBANK_ACCESS_TOKEN by default.
        base_url (Optional[str]): Overrides the environment base URL.
        environment (Optional[str]): SANDBOX or PRODUCTION.
        timeout (Optional[float]): Default timeout in seconds.
        user_agent (Optional[str]): Value of the User-Agent header.
        session (Optional[Session]): Preconfigured session (proxies, adapters, certs).
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        base_url: Optional[str] = None,
        environment: Optional[str] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        session: Optional[Session] = None,
    ) -> None:
        self.base_url: str = (
            base_url.rstrip('/') if base_url else settings.get_base_url(environment)
        )
        self.__access_token: str = (
            access_token if access_token is not None else settings.ACCESS_TOKEN
        )
        self.timeout: float = timeout if timeout is not None else settings.TIMEOUT
        self.user_agent: str = user_agent or settings.USER_AGENT
        self.session: Session = session or requests.Session()

        self.pix: PIXService = PIXService(client=self)

    @staticmethod
    def build_path(template: str, **path_params: str) -> str:
        """Formats a path template, percent-encoding every parameter."""
        return template.format(
            **{name: quote(str(value), safe='') for name, value in path_params.items()}
        )

    def _default_headers(self) -> dict[str, str]:
        headers = {
            'Accept': 'application/json',
            'Content-Type': 'application/json',
            'User-Agent': self.user_agent,
        }
        if self.__access_token:
            headers['Authorization'] = f'Bearer {self.__access_token}'
        return headers

    def new_api_request(
        self, method: HTTPMethod, path: str, body: RequestBody = None
    ) -> Request:
        """
        Builds an unsent request for the given API path.

        GET bodies are encoded as the query string, any other method sends
        the body as JSON.

        Args:
            method (HTTPMethod): The HTTP method.
            path (str): Path below the base URL, starting with '/'.
            body (RequestBody): A pydantic model or a plain dict.

        Returns:
            Request: The request, still open for header changes.
        """
        payload = body
        if isinstance(body, BaseModel):
            payload = body.model_dump(mode='json', by_alias=True, exclude_none=True)

        method = HTTPMethod(method).value
        url = f'{self.base_url}{path}'
        if method == HTTPMethod.GET.value:
            return Request(
                method=method, url=url, params=payload, headers=self._default_headers()
            )
        return Request(
            method=method, url=url, json=payload, headers=self._default_headers()
        )

    def do(
        self,
        request: Request,
        destination: Optional[Type[ResponseModelType]] = None,
        timeout: Optional[float] = None,
    ) -> tuple[Response, Optional[ResponseModelType]]:
        """
        Sends the request and decodes the body into destination.

        Args:
            request (Request): Built by new_api_request.
            destination (Optional[Type[ResponseModelType]]): Model for the body,
                None when the operation has no typed body.
            timeout (Optional[float]): Overrides the client default timeout.

        Returns:
            tuple[Response, Optional[ResponseModelType]]: The response and the
            decoded body, None when no destination was given.

        Raises:
            HTTPError, ConnectionError, Timeout, RequestException: Re-raised as is.
            APIException: Non-success HTTP status.
            DecodeException: Body does not match destination.
        """
        prepared = self.session.prepare_request(request)
        logger.info(
            'Make request to Openbank API',
            extra={
                'url': prepared.url,
                'method': prepared.method,
                'has_idempotency_key': IDEMPOTENCY_KEY_HEADER in prepared.headers,
            },
        )
        try:
            response: Response = self.session.send(
                prepared, timeout=timeout if timeout is not None else self.timeout
            )
        except (HTTPError, ConnectionError, Timeout, RequestException) as err:
            logger.exception(
                msg=f'Error occurred in call {prepared.url}: {err}',
                extra={'endpoint': prepared.url, 'error_type': type(err).__name__},
            )
            raise

        if not response.ok:
            error = self._extract_error(response)
            logger.error(
                f'Openbank API answered {response.status_code} for {prepared.url}',
                extra={
                    'endpoint': prepared.url,
                    'status_code': response.status_code,
                    'error_type': error.type if error else None,
                },
            )
            raise APIException(response=response, error=error)

        if destination is None:
            return response, None
        return response, self.validate_response_data(response, destination)

    @staticmethod
    def _extract_error(response: Response) -> Optional[APIErrorBody]:
        try:
            return APIErrorBody.model_validate(response.json())
        except (ValueError, ValidationError):
            return None

    @staticmethod
    def validate_response_data(
        response: Response, base_model_class: Type[ResponseModelType]
    ) -> ResponseModelType:
        """
        Validates the response data against a pydantic model.

        Raises:
            DecodeException: Body is not JSON or does not fit the model.
        """
        try:
            data = response.json()
        except ValueError as err:
            logger.exception(
                msg='Response body from Openbank API is not JSON',
                extra={'endpoint': response.url, 'status_code': response.status_code},
            )
            raise DecodeException(
                response=response, model_name=base_model_class.__name__
            ) from err

        try:
            return base_model_class.model_validate(data)
        except ValidationError as ve:
            logger.exception(
                msg=f'Invalid response format for {base_model_class.__name__}',
                extra={'error_details': ve.errors(include_input=False)},
            )
            raise DecodeException(
                response=response,
                model_name=base_model_class.__name__,
                errors=ve.errors(),
            ) from ve
