"""JSON log output for the alarm callback.

Every record becomes one JSON object per line. Context passed through
`extra={...}` (stream id, recipient, lengths) is written as top-level keys.
"""

import json
import logging
import sys
from collections.abc import Sequence
from datetime import datetime, timezone

# Keys present on a bare LogRecord; the formatter skips these.
_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
    | {"message", "asctime"}
)

_DEFAULT_SUPPRESS = ("httpx", "httpcore")


class JsonFormatter(logging.Formatter):
    """Formats a record, its extra context and any traceback as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS:
                log_entry[key] = value

        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def setup_logging(
    level: str = "INFO",
    suppress: Sequence[str] = _DEFAULT_SUPPRESS,
) -> None:
    """Send all alarm callback logs to stdout as JSON.

    Unknown level names fall back to INFO. Loggers named in *suppress*
    (the gateway's HTTP client by default) only report warnings.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)

    for name in suppress:
        logging.getLogger(name).setLevel(logging.WARNING)
