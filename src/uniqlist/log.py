"""Logging configuration

The library itself only creates module loggers, applications opt in
to handlers with `configure_logging`.
"""

import copy
import logging
from logging.config import dictConfig

logger = logging.getLogger(__name__)

__all__ = [
    'configure_logging',
    'set_level',
    'class_logger',
    ]


def set_level(levelname):
    """Set root logging level and the level of all root handlers"""
    level_names = {v: k for k, v in logging._levelToName.items()}
    level_names['WARN'] = level_names['WARNING']
    level = level_names[levelname.upper()]
    for handler in logging.root.handlers:
        handler.setLevel(level)
    logging.root.setLevel(level)


DEF_CMD_FMT = '%(levelname)-4s %(asctime)s %(name)s %(lineno)d %(message)s'

LOG_CONF = {
    'version': 1,
    'disable_existing_loggers': False,
    'loggers': {},
    'formatters': {
        'cmd_fmt': {'format': DEF_CMD_FMT},
    },
    'handlers': {
        'cmd': {
            'level': 'DEBUG',
            'formatter': 'cmd_fmt',
            'class': 'logging.StreamHandler',
            },
        },
    }

CMD_CONF = {
    'loggers': {
        'uniqlist': {
            'handlers': ['cmd'],
            'level': 'DEBUG',
            'propagate': False,
        },
    },
}

SETUPS = {
    '': {},
    'cmd': CMD_CONF,
    }


def configure_logging(setup='cmd', level=None):
    """Configure console logging for the uniqlist loggers

    setup: '' applies the base config only, 'cmd' adds a stream handler
    level: optional root level name, see `set_level`
    """
    logconfig = copy.deepcopy(LOG_CONF)
    logconfig['loggers'].update(copy.deepcopy(SETUPS[setup]).get('loggers', {}))
    dictConfig(logconfig)
    if level:
        set_level(level)


def class_logger(cls, enable=False):
    """Attach a `<module>.<Class>` logger to a class, usable as a decorator
    """
    logger = logging.getLogger(cls.__module__ + '.' + cls.__name__)
    if enable == 'debug':
        logger.setLevel(logging.DEBUG)
    elif enable == 'info':
        logger.setLevel(logging.INFO)
    cls._should_log_debug = lambda self: logger.isEnabledFor(logging.DEBUG)
    cls.logger = logger
    return cls


if __name__ == '__main__':
    configure_logging('cmd', level='debug')
    logger = logging.getLogger('uniqlist')
    logger.debug('Debug')
    logger.info('Info')
    logger.warning('Warning')
