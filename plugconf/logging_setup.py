from __future__ import annotations
import json
import logging
import threading
from .settings import Settings
from .values import get_pid

_init_lock = threading.Lock()

class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "pid": get_pid(),
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)

def setup_logging(settings: Settings) -> None:
    """
    Configure the root logger with a single console handler.

    Safe to call more than once: handlers installed by an earlier call are
    replaced, not duplicated.
    """
    with _init_lock:
        root = logging.getLogger()
        for h in list(root.handlers):
            if getattr(h, "_plugconf_handler", False):
                root.removeHandler(h)
        root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

        fmt = _JsonFormatter() if settings.log_json else logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

        ch = logging.StreamHandler()
        ch.setFormatter(fmt)
        ch._plugconf_handler = True
        root.addHandler(ch)

def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
