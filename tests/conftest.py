# tests/conftest.py
from __future__ import annotations

from typing import Any, List, Tuple

import pytest
from loguru import logger

from learning_strategies.core.base import LearningStrategy


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture
def log_messages():
    """
    捕获 loguru 输出（DEBUG 及以上）

    Usage:
        logs.info("x")
        assert any("x" in m for m in log_messages)
    """
    captured: List[str] = []
    sink_id = logger.add(lambda msg: captured.append(str(msg)), level="DEBUG")
    yield captured
    logger.remove(sink_id)


class RecordingStrategy(LearningStrategy):
    """
    Records every callback as (name, op, i) into a shared `calls` list.

    stop_at: finished() returns True when i >= stop_at (None = never).
    """

    def __init__(self, name: str, calls: List[Tuple], stop_at: int | None = None):
        self.name = name
        self.calls = calls
        self.stop_at = stop_at
        self.items: List[Any] = []

    def setup(self, model, data):
        self.calls.append((self.name, "setup", None))

    def update(self, model, i, item):
        self.items.append(item)
        self.calls.append((self.name, "update", i))

    def hook(self, model, data, i):
        self.calls.append((self.name, "hook", i))

    def finished(self, model, data, i):
        self.calls.append((self.name, "finished", i))
        return self.stop_at is not None and i >= self.stop_at

    def cleanup(self, model):
        self.calls.append((self.name, "cleanup", None))

    def __repr__(self):
        return f"Recording({self.name})"


@pytest.fixture
def calls() -> List[Tuple]:
    return []


@pytest.fixture
def make_recorder(calls):
    """
    Factory fixture for RecordingStrategy sharing one `calls` list.

        a = make_recorder("A")
        b = make_recorder("B", stop_at=3)
    """

    def _make(name: str, stop_at: int | None = None) -> RecordingStrategy:
        return RecordingStrategy(name, calls, stop_at=stop_at)

    return _make


class Counter(LearningStrategy):
    """update() 计数器"""

    def __init__(self):
        self.n = 0

    def update(self, model, i, item):
        self.n += 1


@pytest.fixture
def counter() -> Counter:
    return Counter()
