import logging
from datetime import datetime, timezone

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI

from shared.logging_utils import configure_logging
from xml_mock.runtime_config import runtime_config

from .core.models import HealthResponse
from .core.service import CC5MockService
from .transport.cc5 import create_router
from .transport.request_logging import request_logging_middleware

load_dotenv()
log_level = configure_logging()
logger = logging.getLogger(__name__)

SERVICE_NAME = "xml-mock"


def build_service() -> CC5MockService:
    return CC5MockService(profile=runtime_config.profile())


def utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


app = FastAPI()
app.middleware("http")(request_logging_middleware)


@app.get("/", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(ok=True, service=SERVICE_NAME, time=utc_timestamp())


app.include_router(
    create_router(
        service_factory=build_service,
        strict_content_type=runtime_config.strict_content_type,
    )
)


@app.on_event("startup")
def log_startup() -> None:
    profile = runtime_config.profile()
    logger.info("XML mock server listening on port %s", runtime_config.port())
    logger.info(
        "Profile: %s (3D secure=%s, loyalty balance=%s)",
        profile.name,
        profile.three_d_secure_enabled,
        profile.loyalty_points_balance,
    )
    if runtime_config.strict_content_type():
        logger.info("Strict content type: only application/xml and text/xml bodies are read")


def main() -> None:
    uvicorn.run(app, host="0.0.0.0", port=runtime_config.port(), log_level=log_level)


if __name__ == "__main__":
    main()
