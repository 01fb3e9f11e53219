import codecs
import logging
from typing import Callable

from fastapi import APIRouter, Depends, Request, Response

from ..core.responses import INVALID_XML_BODY, XML_CONTENT_TYPE
from ..core.service import CC5MockService
from ..core.xml_document import MalformedXmlError
from .request_logging import log_request_body

logger = logging.getLogger(__name__)

XML_MEDIA_TYPES = frozenset({"application/xml", "text/xml"})
DEFAULT_CHARSET = "utf-8"


def media_type_of(content_type: str | None) -> str:
    return (content_type or "").split(";", 1)[0].strip().lower()


def charset_of(content_type: str | None) -> str:
    for param in (content_type or "").split(";")[1:]:
        name, _, value = param.partition("=")
        if name.strip().lower() != "charset":
            continue
        charset = value.strip().strip("\"'")
        try:
            return codecs.lookup(charset).name
        except LookupError:
            logger.warning("Unknown charset %r, decoding as %s", charset, DEFAULT_CHARSET)
            return DEFAULT_CHARSET
    return DEFAULT_CHARSET


def accepts_body(content_type: str | None, *, strict: bool) -> bool:
    if not strict:
        return True
    return media_type_of(content_type) in XML_MEDIA_TYPES


async def read_body_text(request: Request, *, strict: bool) -> str:
    if not accepts_body(request.headers.get("content-type"), strict=strict):
        logger.info(
            "Ignoring body with content-type=%r (strict mode)",
            request.headers.get("content-type"),
        )
        return ""
    raw = await request.body()
    return raw.decode(charset_of(request.headers.get("content-type")), errors="replace")


def create_router(
    *,
    service_factory: Callable[[], CC5MockService],
    strict_content_type: Callable[[], bool] = lambda: False,
) -> APIRouter:
    router = APIRouter(tags=["cc5"])

    def get_service() -> CC5MockService:
        return service_factory()

    @router.post("/")
    @router.post("/cc5/pay")
    async def cc5_pay(
        request: Request,
        service: CC5MockService = Depends(get_service),
    ) -> Response:
        """
        Mock CC5 payment endpoint.

        Responsibilities:
        - Read the body as text
        - Delegate classification and rendering to the service
        - Map malformed XML to 400
        """
        body = await read_body_text(request, strict=strict_content_type())
        log_request_body(body)

        try:
            result = service.handle_request(body)
        except MalformedXmlError as exc:
            logger.warning("Parse error: %s", exc)
            return Response(content=INVALID_XML_BODY, status_code=400)

        return Response(content=result.body, status_code=200, media_type=XML_CONTENT_TYPE)

    return router
