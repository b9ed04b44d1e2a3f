#!filepath: learning_strategies/strategies/callbacks.py
from __future__ import annotations

from typing import Any, Callable, Optional

from learning_strategies.core.base import LearningStrategy
from learning_strategies.utils.logger import logs


class IterFunction(LearningStrategy):
    """
    Call `f(model, i)` every `every` iterations.

        IterFunction(f)
        IterFunction(f, 5)
        IterFunction(5, f)
    """

    def __init__(self, f, every=1):
        # IterFunction(every, f)
        if isinstance(f, int) and not isinstance(f, bool) and callable(every):
            f, every = every, f
        if not callable(f):
            raise TypeError(f"[IterFunction] f must be callable, got {type(f).__name__}")
        if every < 1:
            raise ValueError(f"[IterFunction] every must be >= 1, got {every}")

        self.f: Callable[[Any, int], Any] = f
        self.every = int(every)

    def hook(self, model: Any, data: Any, i: int) -> None:
        if i % self.every == 0:
            self.f(model, i)

    def __repr__(self) -> str:
        return f"IterFunction({getattr(self.f, '__name__', self.f)}, {self.every})"


def _default_status(model: Any, i: int) -> str:
    return f"Iteration {i}: {model!r}"


class ShowStatus(LearningStrategy):
    """
    Every `every` iterations, log `f(model, i)`.

    Also logs once during setup with i = 0 (initial state).
    """

    def __init__(self, every: int = 1, f: Optional[Callable[[Any, int], str]] = None):
        if every < 1:
            raise ValueError(f"[ShowStatus] every must be >= 1, got {every}")
        self.every = int(every)
        self.f = f if f is not None else _default_status

    def setup(self, model: Any, data: Any) -> None:
        self.hook(model, data, 0)

    def hook(self, model: Any, data: Any, i: int) -> None:
        if i % self.every == 0:
            logs.info(f"[ShowStatus] {self.f(model, i)}")

    def __repr__(self) -> str:
        return f"ShowStatus({self.every})"
