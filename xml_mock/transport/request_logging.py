from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import Request

logger = logging.getLogger(__name__)

SEPARATOR = "=" * 80


def log_inbound_request(request: Request) -> None:
    try:
        logger.info(
            "Incoming request [%s] %s %s headers=%s",
            datetime.now(timezone.utc).isoformat(),
            request.method,
            request.url.path,
            dict(request.headers),
        )
    except Exception:
        # Request logging never fails the request.
        return


def log_request_body(body: str) -> None:
    if not body:
        return
    try:
        logger.info("Request body:\n%s\n%s", body, SEPARATOR)
    except Exception:
        return


async def request_logging_middleware(request: Request, call_next):
    log_inbound_request(request)
    return await call_next(request)
