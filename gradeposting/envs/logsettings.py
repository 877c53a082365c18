"""
Logging configuration for gradeposting services.
"""
import platform
import sys
from logging.handlers import SysLogHandler

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def get_logger_config(logging_env="no_env",
                      debug=False,
                      local_loglevel='INFO',
                      console_loglevel=None,
                      use_syslog=False):
    """
    Return the appropriate logging config dictionary. You should assign the
    result of this to the LOGGING var in your settings.

    Console logging is always configured. When ``use_syslog`` is set, records
    are also sent to the local rsyslogd on the LOCAL0 facility.
    """
    # Revert to INFO if an invalid string is passed in
    if local_loglevel not in LOG_LEVELS:
        local_loglevel = 'INFO'

    if console_loglevel is None or console_loglevel not in LOG_LEVELS:
        console_loglevel = 'DEBUG' if debug else 'INFO'

    hostname = platform.node().split(".")[0]
    syslog_format = (
        "[service_variant=gradeposting]"
        "[%(name)s][env:{logging_env}] %(levelname)s "
        "[{hostname}  %(process)d] [%(filename)s:%(lineno)d] "
        "- %(message)s"
    ).format(logging_env=logging_env, hostname=hostname)

    handlers = ['console', 'local'] if use_syslog else ['console']

    logger_config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': '%(asctime)s %(levelname)s %(process)d '
                          '[%(name)s] %(filename)s:%(lineno)d - %(message)s',
            },
            'syslog_format': {'format': syslog_format},
        },
        'handlers': {
            'console': {
                'level': console_loglevel,
                'class': 'logging.StreamHandler',
                'formatter': 'standard',
                'stream': sys.stderr,
            },
        },
        'loggers': {
            'django': {
                'handlers': handlers,
                'propagate': False,
                'level': 'INFO'
            },
            'gradeposting': {
                'handlers': handlers,
                'level': 'DEBUG' if debug else 'INFO',
                'propagate': False,
            },
            '': {
                'handlers': handlers,
                'level': 'INFO',
                'propagate': False
            },
        }
    }

    if use_syslog:
        logger_config['handlers']['local'] = {
            'level': local_loglevel,
            'class': 'logging.handlers.SysLogHandler',
            'address': '/dev/log',
            'formatter': 'syslog_format',
            'facility': SysLogHandler.LOG_LOCAL0,
        }

    return logger_config
