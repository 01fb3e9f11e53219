from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

import pytest

from xml_mock.core.models import PROFILES
from xml_mock.core.service import CC5MockService


@dataclass
class FakeOrderIds:
    generated: list[str] = field(default_factory=list)

    def generate(self) -> str:
        value = f"ORDER-1700000000000abc{len(self.generated):06d}"
        self.generated.append(value)
        return value


class ExplodingLogger:
    def log(self, level, msg, *args, **kwargs) -> None:
        raise RuntimeError("log sink unavailable")


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 11, 24, 11, 15, 36, tzinfo=timezone.utc)


@pytest.fixture
def fake_order_ids() -> FakeOrderIds:
    return FakeOrderIds()


@pytest.fixture
def service(fixed_now, fake_order_ids) -> CC5MockService:
    return CC5MockService(
        profile=PROFILES["three_d"],
        order_ids=fake_order_ids,
        clock=lambda: fixed_now,
    )


@pytest.fixture
def basic_service(fixed_now, fake_order_ids) -> CC5MockService:
    return CC5MockService(
        profile=PROFILES["basic"],
        order_ids=fake_order_ids,
        clock=lambda: fixed_now,
    )


@pytest.fixture
def exploding_logger() -> ExplodingLogger:
    return ExplodingLogger()
