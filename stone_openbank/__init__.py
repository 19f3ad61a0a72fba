"""Python client for the Stone Openbank PIX API."""

__version__ = '0.1.0'

from stone_openbank.client import OpenbankClient  # noqa: E402
from stone_openbank.common.exceptions import (  # noqa: E402
    APIException,
    DecodeException,
    InvalidIdempotencyKeyException,
    OpenbankException,
)
from stone_openbank.common.result import APIResult  # noqa: E402

__all__ = [
    'APIException',
    'APIResult',
    'DecodeException',
    'InvalidIdempotencyKeyException',
    'OpenbankClient',
    'OpenbankException',
]
