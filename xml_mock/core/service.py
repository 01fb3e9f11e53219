from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

from .classifier import classify
from .extraction import extract_fields
from .models import CC5MockResult, MockProfile, PROFILES, DEFAULT_PROFILE_NAME, ResponseKind
from .order_ids import OrderIdGenerator, TimestampOrderIdGenerator, resolve_order_id
from .responses import render_response
from .xml_document import parse_xml

logger = logging.getLogger(__name__)


KIND_LABELS = {
    ResponseKind.THREE_D_SECURE: "3D Secure request detected",
    ResponseKind.LOYALTY_POINTS_QUERY: "MAXIPUANSORGU request detected",
    ResponseKind.STANDARD_PAYMENT: "Standard payment",
}


class CC5MockService:
    def __init__(
        self,
        *,
        profile: MockProfile | None = None,
        order_ids: OrderIdGenerator | None = None,
        clock=None,
        log: logging.Logger | None = None,
    ):
        self.profile = profile or PROFILES[DEFAULT_PROFILE_NAME]
        self.order_ids = order_ids or TimestampOrderIdGenerator()
        self.clock = clock or (lambda: datetime.now(timezone.utc))
        self.log = log or logger

    def handle_request(self, body: str | None) -> CC5MockResult:
        """
        Raises MalformedXmlError when the body is not well-formed XML.
        """
        document = parse_xml(body)
        self._log(logging.DEBUG, "Parsed request: %s", _dump(document.to_dict()))

        fields = extract_fields(document)
        order_id = resolve_order_id(fields.order_id, self.order_ids)
        kind = classify(fields, three_d_secure_enabled=self.profile.three_d_secure_enabled)

        self._log(
            logging.INFO,
            "%s profile=%s order_id=%s store_type=%r maxi_puan_sorgu=%r",
            KIND_LABELS[kind],
            self.profile.name,
            order_id,
            fields.store_type,
            fields.maxi_puan_sorgu,
        )

        body_xml = render_response(kind, order_id=order_id, now=self.clock(), profile=self.profile)
        self._log(logging.INFO, "Response body kind=%s:\n%s", kind.value, body_xml)
        return CC5MockResult(kind=kind, order_id=order_id, body=body_xml)

    def _log(self, level: int, msg: str, *args: Any) -> None:
        try:
            self.log.log(level, msg, *args)
        except Exception:
            return


def _dump(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)
