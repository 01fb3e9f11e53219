from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel


class ResponseKind(str, Enum):
    THREE_D_SECURE = "THREE_D_SECURE"
    LOYALTY_POINTS_QUERY = "LOYALTY_POINTS_QUERY"
    STANDARD_PAYMENT = "STANDARD_PAYMENT"


@dataclass(frozen=True)
class ExtractedFields:
    order_id: str | None = None
    store_type: str | None = None
    maxi_puan_sorgu: str | None = None


class MockProfile(BaseModel):
    name: str
    three_d_secure_enabled: bool = True
    loyalty_points_balance: str = "100000.00"


DEFAULT_PROFILE_NAME = "three_d"

PROFILES: dict[str, MockProfile] = {
    "three_d": MockProfile(
        name="three_d",
        three_d_secure_enabled=True,
        loyalty_points_balance="100000.00",
    ),
    "basic": MockProfile(
        name="basic",
        three_d_secure_enabled=False,
        loyalty_points_balance="50.00",
    ),
}


class CC5MockResult(BaseModel):
    kind: ResponseKind
    order_id: str
    body: str


class HealthResponse(BaseModel):
    ok: bool = True
    service: str = "xml-mock"
    time: str
