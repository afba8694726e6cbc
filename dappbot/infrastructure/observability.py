"""Structured Logging — JSON lines tagged for the Dappbot API.

Invariants:
    - Every line carries timestamp, level, logger, message and service
    - Request-scoped extras (error_code, path, status_code, dapp_name) copied when set
    - A record naming a rejected `shape` is tagged event="invalid_body",
      with error_code defaulting to INVALID_BODY
    - JSON format in production, human-readable in development

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called once on startup via lifespan
"""

import logging
import json
from datetime import datetime, timezone


SERVICE_NAME = "dappbot-api"
EXTRA_FIELDS = ("error_code", "path", "status_code", "dapp_name")
INVALID_BODY_EVENT = "invalid_body"


class JSONFormatter(logging.Formatter):
    """One JSON object per record; rejected bodies get a uniform event tag."""

    def __init__(self, service: str = SERVICE_NAME):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "service": self.service,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val

        shape = record.__dict__.get("shape")
        if shape is not None:
            log["event"] = INVALID_BODY_EVENT
            log["shape"] = shape
            log.setdefault("error_code", "INVALID_BODY")

        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging for the application. Returns the installed handler."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
