#!filepath: learning_strategies/strategies/verbose.py
from __future__ import annotations

from typing import Any

from learning_strategies.core.base import LearningStrategy
from learning_strategies.utils.logger import logs


class Verbose(LearningStrategy):
    """
    Verbose(strategy)

    Transparent decorator:
    - delegates every callback to the wrapped strategy
    - logs `strategy.summary(model, i)` when the wrapped `finished` is True
    - never changes the returned bool
    """

    def __init__(self, strategy: LearningStrategy):
        self.strategy = strategy

    def setup(self, model: Any, data: Any) -> None:
        logs.debug(f"[Verbose] setup {self.strategy!r}")
        self.strategy.setup(model, data)

    def update(self, model: Any, i: int, item: Any) -> None:
        self.strategy.update(model, i, item)

    def hook(self, model: Any, data: Any, i: int) -> None:
        self.strategy.hook(model, data, i)

    def finished(self, model: Any, data: Any, i: int) -> bool:
        done = self.strategy.finished(model, data, i)
        if done:
            logs.info(f"[Verbose] {self.strategy.summary(model, i)}")
        return done

    def cleanup(self, model: Any) -> None:
        self.strategy.cleanup(model)
        logs.debug(f"[Verbose] cleanup {self.strategy!r}")

    def summary(self, model: Any, i: int) -> str:
        return self.strategy.summary(model, i)

    def __repr__(self) -> str:
        return f"Verbose {self.strategy!r}"
