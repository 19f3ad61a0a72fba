import logging.config
from typing import Optional

from decouple import config

from stone_openbank import __version__
from stone_openbank.common.enums import EnvironmentEnum, EnvironmentType

# ENVIRONMENT VARIABLES
ENVIRONMENT: EnvironmentType = config('STONE_OPENBANK_ENVIRONMENT', default='SANDBOX')

# Empty means "use the URL of ENVIRONMENT"
BASE_URL: str = config('STONE_OPENBANK_BASE_URL', default='')
ACCESS_TOKEN: str = config('STONE_OPENBANK_ACCESS_TOKEN', default='')
TIMEOUT: float = config('STONE_OPENBANK_TIMEOUT', default=30.0, cast=float)
USER_AGENT: str = config(
    'STONE_OPENBANK_USER_AGENT', default=f'stone-openbank-python/{__version__}'
)

LOG_LEVEL: str = config('STONE_OPENBANK_LOG_LEVEL', default='INFO')
LOGGING_SOURCE_TOKEN: str = config('STONE_OPENBANK_LOGGING_SOURCE_TOKEN', default='')


def get_base_url(environment: Optional[str] = None) -> str:
    """Resolves the API base URL, STONE_OPENBANK_BASE_URL wins over ENVIRONMENT."""
    if BASE_URL:
        return BASE_URL.rstrip('/')
    return EnvironmentEnum[(environment or ENVIRONMENT).upper()].base_url


logging.getLogger('requests').setLevel(logging.ERROR)
logging.getLogger('urllib3').setLevel(logging.ERROR)

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'base': {'format': '{name} ({levelname}) :: {message}', 'style': '{'}
    },
    'handlers': {
        'console': {'class': 'logging.StreamHandler', 'formatter': 'base'},
    },
    'loggers': {
        'stone_openbank': {'handlers': ['console'], 'level': LOG_LEVEL},
    },
}

if LOGGING_SOURCE_TOKEN:
    LOGGING['handlers']['logtail'] = {
        'class': 'logtail.LogtailHandler',
        'formatter': 'base',
        'source_token': LOGGING_SOURCE_TOKEN,
    }
    LOGGING['loggers']['stone_openbank']['handlers'].append('logtail')


def configure_logging() -> None:
    """Applies LOGGING. Not called on import, the host application decides."""
    logging.config.dictConfig(LOGGING)
