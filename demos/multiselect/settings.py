"""The module contains the settings of the demo."""

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {
            'level': 'DEBUG',
            'class': 'logging.StreamHandler',
        },
    },
    'loggers': {
        'tessera': {
            'handlers': ['console'],
            'level': 'DEBUG',
        },
    },
}
