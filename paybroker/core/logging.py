import json
import logging
import os
from datetime import datetime, timezone

from paybroker.core.config import Settings

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Marker attribute so repeated setup only replaces handlers installed here
_HANDLER_FLAG = "_paybroker_handler"


class JsonFormatter(logging.Formatter):
    """One JSON object per line: timestamp, level, logger, message."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def _mark(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_FLAG, True)
    return handler


def setup_logging(settings: Settings) -> logging.Logger:
    root = logging.getLogger()
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO
    root.setLevel(level)

    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            root.removeHandler(handler)
            handler.close()

    if settings.LOG_TO_FILE:
        os.makedirs(settings.LOG_DIR, exist_ok=True)

        error_handler = logging.FileHandler(os.path.join(settings.LOG_DIR, "error.log"))
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(JsonFormatter())
        root.addHandler(_mark(error_handler))

        combined_handler = logging.FileHandler(os.path.join(settings.LOG_DIR, "combined.log"))
        combined_handler.setFormatter(JsonFormatter())
        root.addHandler(_mark(combined_handler))

    if not settings.is_production:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        root.addHandler(_mark(console))

    return logging.getLogger("paybroker")
