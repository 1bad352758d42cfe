"""Structured logging setup."""
import logging, sys, json
from typing import Optional

_RESERVED_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    def format(self, record):
        base = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        # fields passed through `extra=`
        for k, v in record.__dict__.items():
            if k.startswith("_") or k in _RESERVED_ATTRS:
                continue
            base[k] = v
        return json.dumps(base, default=str)


def configure_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    root = logging.getLogger()
    if root.handlers:
        return
    if level is None or log_format is None:
        from phrasesync.config import get_settings
        settings = get_settings()
        level = level or settings.log_level.value
        log_format = log_format or settings.log_format
    root.setLevel(level)
    handler = logging.StreamHandler(sys.stdout)
    if log_format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    root.addHandler(handler)
