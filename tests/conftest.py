"""Shared pytest fixtures and configuration for the ksortable test suite.

Guidelines
----------
* Core tests must be pure — no real clock, no real entropy.
* The system providers are only exercised by the infra tests.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import pytest

from ksortable.core.generator import KsuidGenerator
from ksortable.utils.constants import EPOCH

FIXED_TIME: int = EPOCH + 107_608_047
FIXED_PAYLOAD: bytes = bytes.fromhex("B5A1CD34B5F99D1154FB6853345C9735")
FIXED_STRING: str = "0ujtsYcgvSTl8PAuAdqWYSMnLOv"
FIXED_RAW: bytes = bytes.fromhex("0669F7EFB5A1CD34B5F99D1154FB6853345C9735")


class FixedClock:
    """Clock stub returning a constant reading."""

    def __init__(self, reading: object = FIXED_TIME) -> None:
        self.reading = reading
        self.calls = 0

    def now(self) -> object:
        self.calls += 1
        return self.reading


class FixedEntropy:
    """Entropy stub returning a constant block."""

    def __init__(self, data: object = FIXED_PAYLOAD) -> None:
        self.data = data
        self.calls = 0

    def read(self, size: int) -> object:
        self.calls += 1
        return self.data


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture()
def entropy() -> FixedEntropy:
    return FixedEntropy()


@pytest.fixture()
def generator(clock: FixedClock, entropy: FixedEntropy) -> KsuidGenerator:
    return KsuidGenerator(clock, entropy)
