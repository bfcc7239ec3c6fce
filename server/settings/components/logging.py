"""Logging configuration.

Every module logs through ``logging.getLogger(__name__)``, so a single
``server`` logger covers the whole project.
"""

from typing import Any, Final

from server.settings.components import config

_LOG_LEVEL: Final = config('DJANGO_LOG_LEVEL', default='INFO')

LOGGING: Final[dict[str, Any]] = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'console': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'console',
        },
    },
    'loggers': {
        'server': {
            'handlers': ['console'],
            'level': _LOG_LEVEL,
            'propagate': True,
        },
        'django': {
            'handlers': ['console'],
            'level': 'WARNING',
            'propagate': True,
        },
    },
}
