from __future__ import annotations

from .models import ExtractedFields
from .xml_document import XmlDocument


REQUEST_ROOT = "CC5Request"


def extract_fields(document: XmlDocument) -> ExtractedFields:
    order_id = document.text_at(REQUEST_ROOT, "OrderId")
    return ExtractedFields(
        order_id=order_id or None,
        store_type=document.text_at(REQUEST_ROOT, "Extra", "STORETYPE"),
        maxi_puan_sorgu=document.text_at(REQUEST_ROOT, "Extra", "MAXIPUANSORGU"),
    )
