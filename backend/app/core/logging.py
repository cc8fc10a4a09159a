"""Logging setup for the SolarYield service.

Records are plain text by default, or one JSON object per line when
``log_json`` is set. Estimate and fallback logs carry the site and result
as ``extra`` fields, which the JSON formatter emits as top-level keys.
"""

from __future__ import annotations

import json
import logging
import time
import uuid
from contextvars import ContextVar
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

request_id_var: ContextVar[str] = ContextVar("request_id", default="")

ACCESS_FIELDS = ("method", "path", "status_code", "duration_ms")
ESTIMATE_FIELDS = (
    "latitude",
    "longitude",
    "system_size",
    "annual_energy",
    "meteorology_source",
)

TEXT_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

access_logger = logging.getLogger("solaryield.access")


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        rid = request_id_var.get()
        if rid:
            entry["request_id"] = rid

        for key in ACCESS_FIELDS + ESTIMATE_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                entry[key] = value

        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tag each request with ``X-Request-ID`` and log its duration."""

    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        rid = request.headers.get("x-request-id") or uuid.uuid4().hex[:8]
        request_id_var.set(rid)

        start = time.perf_counter()
        response: Response = await call_next(request)
        duration_ms = round((time.perf_counter() - start) * 1000, 1)
        response.headers["X-Request-ID"] = rid

        access_logger.info(
            "%s %s %s (%.1fms)",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response


def setup_logging(json_format: bool = False) -> None:
    handler = logging.StreamHandler()
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.INFO)

    # httpx logs every NASA POWER request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
