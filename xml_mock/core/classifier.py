from __future__ import annotations

from .models import ExtractedFields, ResponseKind


THREE_D_STORE_TYPES = frozenset({"3d", "3d_pay"})
LOYALTY_POINTS_QUERY_FLAG = "MAXIPUANSORGU"


def is_three_d_store_type(store_type: str | None) -> bool:
    if not store_type:
        return False
    return store_type.lower() in THREE_D_STORE_TYPES


def classify(fields: ExtractedFields, *, three_d_secure_enabled: bool = True) -> ResponseKind:
    if three_d_secure_enabled and is_three_d_store_type(fields.store_type):
        return ResponseKind.THREE_D_SECURE
    if fields.maxi_puan_sorgu == LOYALTY_POINTS_QUERY_FLAG:
        return ResponseKind.LOYALTY_POINTS_QUERY
    return ResponseKind.STANDARD_PAYMENT
