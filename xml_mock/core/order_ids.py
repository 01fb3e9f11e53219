from __future__ import annotations

import secrets
import string
import time
from typing import Callable, Protocol


ORDER_ID_PREFIX = "ORDER-"
SUFFIX_ALPHABET = string.ascii_lowercase + string.digits
SUFFIX_LENGTH = 9


class OrderIdGenerator(Protocol):
    def generate(self) -> str:
        ...


class TimestampOrderIdGenerator:
    def __init__(
        self,
        clock_ms: Callable[[], int] | None = None,
        choice: Callable[[str], str] | None = None,
    ) -> None:
        self._clock_ms = clock_ms or (lambda: time.time_ns() // 1_000_000)
        self._choice = choice or secrets.choice

    def generate(self) -> str:
        suffix = "".join(self._choice(SUFFIX_ALPHABET) for _ in range(SUFFIX_LENGTH))
        return f"{ORDER_ID_PREFIX}{self._clock_ms()}{suffix}"


def resolve_order_id(order_id: str | None, generator: OrderIdGenerator) -> str:
    if order_id:
        return order_id
    return generator.generate()
