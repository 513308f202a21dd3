import os

SECRET_KEY = os.getenv('SECRET_KEY', '')

INSTALLED_APPS = []

HASHIDS_MIN_LENGTH = 7
HASHIDS_ALPHABET = 'abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXY1234567890'

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '%(asctime)s %(levelname)s %(name)s %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'loggers': {
        'dnsync': {
            'handlers': ['console'],
            'level': os.getenv('DNSYNC_LOG_LEVEL', 'INFO'),
        },
    },
}
