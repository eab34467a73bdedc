"""
Shared fixtures for the bloom data API tests.
"""

import pytest
from fastapi.testclient import TestClient

from bloom_api.main import app


class ConstantSource:
    """RandomSource that always returns the same value."""

    def __init__(self, value: float):
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


class SequenceSource:
    """RandomSource that replays a fixed list of values, cycling when exhausted."""

    def __init__(self, values):
        self.values = list(values)
        self.pos = 0

    def random(self) -> float:
        val = self.values[self.pos % len(self.values)]
        self.pos += 1
        return val


@pytest.fixture
def client():
    return TestClient(app)
