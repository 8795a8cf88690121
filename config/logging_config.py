import copy
import logging.config

LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
        },
    },
    'handlers': {
        'default': {
            'level': 'INFO',
            'formatter': 'standard',
            'class': 'logging.StreamHandler',
            'stream': 'ext://sys.stdout',
        },
    },
    'loggers': {
        '': {  # root logger
            'handlers': ['default'],
            'level': 'INFO',
            'propagate': True
        },
        'PIL': {
            'level': 'WARNING',
            'propagate': False
        },
        'pytesseract': {
            'level': 'WARNING',
            'propagate': False
        },
        'resume_extractor': {
            'handlers': ['default'],
            'level': 'INFO',
            'propagate': False
        }
    }
}

def build_logging_config(level: str = None) -> dict:
    """LOGGING_CONFIG with the handler and package logger set to level"""
    config = copy.deepcopy(LOGGING_CONFIG)
    if level:
        config['handlers']['default']['level'] = level
        config['loggers']['resume_extractor']['level'] = level
    return config


def setup_logging(level: str = None):
    """Configure logging for the application"""
    logging.config.dictConfig(build_logging_config(level))
