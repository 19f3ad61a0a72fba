import sys
from collections import namedtuple
from enum import Enum
from typing import Literal

EnvironmentType = Literal[
    'SANDBOX',
    'PRODUCTION',
]

if sys.version_info >= (3, 11):
    from enum import StrEnum
    from http import HTTPMethod

    class PixPaymentStatus(StrEnum):
        CREATED = 'CREATED'
        FAILED = 'FAILED'
        MONEY_RESERVED = 'MONEY_RESERVED'
        SETTLED = 'SETTLED'
        REFUNDED = 'REFUNDED'

    class QRCodeType(StrEnum):
        STATIC = 'static'
        DYNAMIC = 'dynamic'

else:

    class HTTPMethod(str, Enum):
        DELETE = 'DELETE'
        GET = 'GET'
        PATCH = 'PATCH'
        POST = 'POST'
        PUT = 'PUT'

    class PixPaymentStatus(str, Enum):
        CREATED = 'CREATED'
        FAILED = 'FAILED'
        MONEY_RESERVED = 'MONEY_RESERVED'
        SETTLED = 'SETTLED'
        REFUNDED = 'REFUNDED'

    class QRCodeType(str, Enum):
        STATIC = 'static'
        DYNAMIC = 'dynamic'


EnvironmentInfo = namedtuple(
    typename='EnvironmentInfo', field_names=['environment_name', 'base_url']
)


class EnvironmentEnum(EnvironmentInfo, Enum):
    SANDBOX = EnvironmentInfo('SANDBOX', 'https://sandbox-api.openbank.stone.com.br')
    PRODUCTION = EnvironmentInfo('PRODUCTION', 'https://api.openbank.stone.com.br')
