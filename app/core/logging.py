"""
Structured logging: one JSON object per line, tagged with the request id
of whichever request emitted it.
"""
import logging
from contextvars import ContextVar
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

# Set by CorrelationIdMiddleware for the lifetime of a request
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

HANDLER_NAME = "jobly-json"

QUIET_LOGGERS = {
    "uvicorn.access": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
    "passlib": logging.ERROR,
}


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


class JoblyJsonFormatter(jsonlogger.JsonFormatter):
    def __init__(self):
        super().__init__(
            "%(levelname)s %(name)s %(message)s %(request_id)s",
            rename_fields={"levelname": "level"},
            timestamp=True,
        )

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        # Startup and background logs have no request
        if not log_record.get("request_id"):
            log_record.pop("request_id", None)


def build_handler(stream=None) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(JoblyJsonFormatter())
    handler.addFilter(RequestIdFilter())
    return handler


def setup_logging(level: int = logging.INFO):
    root = logging.getLogger()
    if any(h.get_name() == HANDLER_NAME for h in root.handlers):
        return
    root.addHandler(build_handler())
    root.setLevel(level)

    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)
