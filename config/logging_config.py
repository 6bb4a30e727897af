import logging
import logging.config
from typing import Optional
from config import settings


class UserFilter(logging.Filter):
    def filter(self, record):
        if not hasattr(record, 'user'):
            record.user = 'SYSTEM'  # Set default user if not provided
        return True


def build_logging_config(level: Optional[str] = None, log_file: Optional[str] = None) -> dict:
    """
    Builds the dictConfig used by the playlist library.

    Every named logger writes to the console; a file handler is added
    only when a log file path is given.

    :param level: Logging level name, defaults to the PLAYLIST_LOG_LEVEL setting.
    :param log_file: Path of the log file, defaults to the PLAYLIST_LOG_FILE setting.
    :return: A dictionary accepted by logging.config.dictConfig.
    """
    level = level or settings.LOG_LEVEL
    log_file = log_file or settings.LOG_FILE
    handlers = {
        'console': {
            'level': level,
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
            'filters': ['user_filter']
        },
    }
    if log_file:
        handlers['file'] = {
            'level': level,
            'class': 'logging.FileHandler',
            'filename': log_file,
            'formatter': 'standard',
            'filters': ['user_filter']
        }
    handler_names = list(handlers)

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(user)s - %(message)s'
            },
        },
        'filters': {
            'user_filter': {
                '()': UserFilter,
            },
        },
        'handlers': handlers,
        'loggers': {
            'use_cases': {
                'handlers': handler_names,
                'level': level,
                'propagate': False,
            },
            'domain': {
                'handlers': handler_names,
                'level': level,
                'propagate': False,
            },
            'utils': {
                'handlers': handler_names,
                'level': level,
                'propagate': False,
            },
        }
    }


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> dict:
    logging_config = build_logging_config(level, log_file)
    logging.config.dictConfig(logging_config)
    return logging_config
