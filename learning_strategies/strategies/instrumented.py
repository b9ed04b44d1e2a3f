#!filepath: learning_strategies/strategies/instrumented.py
from __future__ import annotations

from typing import Any, Optional

from learning_strategies.core.base import LearningStrategy
from learning_strategies.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)


class Instrumented(LearningStrategy):
    """
    Instrumented(strategy, inst=None, name=None)

    Transparent decorator that times every callback of `strategy`:

        timeline["<name>.update"]  += elapsed
        metrics["<name>.update"]   += 1

    Behavior of the wrapped strategy is unchanged; exceptions propagate
    (the elapsed time is still recorded).
    """

    def __init__(
        self,
        strategy: LearningStrategy,
        inst: Instrumentation | NoOpInstrumentation | None = None,
        name: Optional[str] = None,
    ):
        self.strategy = strategy
        # 永远保证 inst 可用（No-op 语义）
        self.inst = inst if inst is not None else NoOpInstrumentation()
        self.name = name or strategy.__class__.__name__

    def _key(self, callback: str) -> str:
        return f"{self.name}.{callback}"

    def setup(self, model: Any, data: Any) -> None:
        key = self._key("setup")
        self.inst.metrics.incr(key)
        with self.inst.timer(key):
            self.strategy.setup(model, data)

    def update(self, model: Any, i: int, item: Any) -> None:
        key = self._key("update")
        self.inst.metrics.incr(key)
        with self.inst.timer(key):
            self.strategy.update(model, i, item)

    def hook(self, model: Any, data: Any, i: int) -> None:
        key = self._key("hook")
        self.inst.metrics.incr(key)
        with self.inst.timer(key):
            self.strategy.hook(model, data, i)

    def finished(self, model: Any, data: Any, i: int) -> bool:
        key = self._key("finished")
        self.inst.metrics.incr(key)
        with self.inst.timer(key):
            return self.strategy.finished(model, data, i)

    def cleanup(self, model: Any) -> None:
        key = self._key("cleanup")
        self.inst.metrics.incr(key)
        with self.inst.timer(key):
            self.strategy.cleanup(model)

    def summary(self, model: Any, i: int) -> str:
        return self.strategy.summary(model, i)

    def __repr__(self) -> str:
        return f"Instrumented({self.strategy!r}, name={self.name!r})"
