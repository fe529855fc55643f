"""Logging setup for applications that use stringops.

The library only creates module loggers under the `stringops` namespace and
never configures handlers on import. `setup_logging` is called by the
demonstration harness; other applications may call it or configure logging
themselves.
"""

__docformat__ = 'google'

__all__ = [
    'JSONFormatter',
    'setup_logging'
]

import json
import logging
from datetime import datetime, timezone

LOGGER_NAME = 'stringops'

EXTRA_FIELDS = ('operation', 'error_code', 'attempt')
"""Record attributes copied into JSON output when present."""

class JSONFormatter(logging.Formatter):
    """Format records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)

def setup_logging(level: str = 'WARNING', fmt: str = 'text', stream=None) -> logging.Logger:
    """
    Attach a single stream handler to the `stringops` logger.

    Calling this again replaces the previous handler rather than stacking a new one.

    Args:
        level: Level name such as 'DEBUG' or 'WARNING'. Unknown names fall back to WARNING.
        fmt: 'json' for `JSONFormatter`, anything else for plain text
        stream: Destination stream, stderr by default

    Returns:
        The configured `stringops` logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    if fmt == 'json':
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s %(name)s: %(message)s',
        ))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return logger
