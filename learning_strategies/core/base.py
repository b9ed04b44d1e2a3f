#!filepath: learning_strategies/core/base.py
from __future__ import annotations

from typing import Any


class LearningStrategy:
    """
    LearningStrategy (FINAL / FROZEN)

    A unit of loop behavior. Subclasses override any subset of:

        setup(model, data)
        update(model, i, item)
        hook(model, data, i)
        finished(model, data, i) -> bool
        cleanup(model)

    Contract:
    - Every method has a harmless default (no-op / False).
    - Only side effects are observable; only `finished` returns a value.
    - Overriding `finished` alone is valid (pure stopping condition).

    `learn` calls these, never the reverse.
    """

    # --------------------------------------------------
    # Lifecycle contract
    # --------------------------------------------------
    def setup(self, model: Any, data: Any) -> None:
        return None

    def update(self, model: Any, i: int, item: Any) -> None:
        return None

    def hook(self, model: Any, data: Any, i: int) -> None:
        return None

    def finished(self, model: Any, data: Any, i: int) -> bool:
        return False

    def cleanup(self, model: Any) -> None:
        return None

    # --------------------------------------------------
    # Display（不属于循环契约，仅供 Verbose 使用）
    # --------------------------------------------------
    def summary(self, model: Any, i: int) -> str:
        return f"{self!r} finished"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
