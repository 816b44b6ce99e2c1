"""JSON logging for the Lambda handlers

`initialize_logging()` runs from each lambda package's `__init__.py`, so the
root logger is configured before a handler module logs anything.

Each record is written to stdout (CloudWatch) as one JSON object:
{
    "timestamp": "2025-10-15T12:30:00.000Z",
    "level": "INFO",
    "logger": "boltshortener.lambdas.shorten_url.app",
    "environment": "dev",
    "event": "SHORTEN_SUCCESS",
    "message": "Shortened URL. Responding with 200.",
    "shortcode": 42
}

`event` is the machine-readable name a module passes via `extra=` (see each
lambda's constants.py); other `extra=` fields such as `shortcode` follow the
message. botocore, boto3 and urllib3 only log warnings and above.
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from boltshortener.constants import ENV
from boltshortener.utils.config import app_env


# Attributes every LogRecord has; anything else came in through `extra=`
RECORD_ATTRS = frozenset(vars(logging.LogRecord('', logging.INFO, '', 0, '', (), None))) | {'message', 'asctime'}

QUIET_LOGGERS = ('botocore', 'boto3', 'urllib3')


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log = {
            'timestamp': datetime.fromtimestamp(record.created, tz=UTC).isoformat(timespec='milliseconds').replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'environment': app_env(),
        }
        if hasattr(record, 'event'):
            log['event'] = record.event
        log['message'] = record.getMessage()

        log.update((key, value) for key, value in vars(record).items() if key not in RECORD_ATTRS and key not in log)
        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        return json.dumps(log, default=str)


def initialize_logging() -> None:
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {'json': {'()': JsonFormatter}},
            'handlers': {'stdout': {'class': 'logging.StreamHandler', 'formatter': 'json', 'stream': 'ext://sys.stdout'}},
            'loggers': {name: {'level': 'WARNING'} for name in QUIET_LOGGERS},
            'root': {'level': os.getenv(ENV.App.LOG_LEVEL, 'INFO').upper(), 'handlers': ['stdout']},
        }
    )
