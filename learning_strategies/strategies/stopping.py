#!filepath: learning_strategies/strategies/stopping.py
from __future__ import annotations

import time
from typing import Any, Callable, Optional

import numpy as np

from learning_strategies.core.base import LearningStrategy
from learning_strategies.utils.logger import logs


def _checked(i: int, every: int) -> bool:
    # i = every, 2*every, ...
    return i % every == 0


class MaxIter(LearningStrategy):
    """Stop learning after `n` iterations."""

    def __init__(self, n: int = 100):
        self.n = int(n)

    def finished(self, model: Any, data: Any, i: int) -> bool:
        return i >= self.n

    def __repr__(self) -> str:
        return f"MaxIter({self.n})"


class TimeLimit(LearningStrategy):
    """
    Stop learning after `secs` seconds.

    The deadline is written during `setup`, so one instance can be reused
    across runs.
    """

    def __init__(self, secs: float):
        self.secs = float(secs)
        self.secs_end: Optional[float] = None

    def setup(self, model: Any, data: Any) -> None:
        self.secs_end = time.perf_counter() + self.secs

    def finished(self, model: Any, data: Any, i: int) -> bool:
        if self.secs_end is None:
            raise RuntimeError("[TimeLimit] finished() called before setup()")

        stop = time.perf_counter() >= self.secs_end
        if stop:
            logs.info(f"[TimeLimit] time limit reached ({self.secs}s) at iteration {i}")
        return stop

    def __repr__(self) -> str:
        return f"TimeLimit({self.secs})"


class Converged(LearningStrategy):
    """
    Stop learning when `norm(f(model) - last) <= tol`.

    `last` starts at zeros (shape of f(model) at setup) and is refreshed on
    every checked iteration that did not converge.
    """

    def __init__(self, f: Callable[[Any], Any], tol: float = 1e-6, every: int = 1):
        if every < 1:
            raise ValueError(f"[Converged] every must be >= 1, got {every}")
        self.f = f
        self.tol = float(tol)
        self.every = int(every)
        self.lastval: Optional[np.ndarray] = None

    def setup(self, model: Any, data: Any) -> None:
        self.lastval = np.zeros_like(np.asarray(self.f(model), dtype=float))

    def finished(self, model: Any, data: Any, i: int) -> bool:
        if not _checked(i, self.every):
            return False

        val = np.asarray(self.f(model), dtype=float)
        if self.lastval is None:
            self.lastval = np.zeros_like(val)

        if np.linalg.norm(val - self.lastval) <= self.tol:
            return True

        self.lastval = val.copy()
        return False

    def summary(self, model: Any, i: int) -> str:
        return f"Converged after {i} iterations: {self.f(model)}"

    def __repr__(self) -> str:
        return f"Converged({getattr(self.f, '__name__', self.f)}, {self.tol}, {self.every})"


class ConvergedTo(LearningStrategy):
    """Stop learning when `norm(f(model) - goal) <= tol`."""

    def __init__(self, f: Callable[[Any], Any], goal: Any, tol: float = 1e-6, every: int = 1):
        if every < 1:
            raise ValueError(f"[ConvergedTo] every must be >= 1, got {every}")
        self.f = f
        self.goal = np.asarray(goal, dtype=float)
        self.tol = float(tol)
        self.every = int(every)

    def finished(self, model: Any, data: Any, i: int) -> bool:
        if not _checked(i, self.every):
            return False

        val = np.asarray(self.f(model), dtype=float)
        if np.linalg.norm(val - self.goal) <= self.tol:
            logs.info(f"[ConvergedTo] converged after {i} iterations: {val}")
            return True
        return False

    def summary(self, model: Any, i: int) -> str:
        return f"Converged to {self.goal} after {i} iterations: {self.f(model)}"

    def __repr__(self) -> str:
        return (
            f"ConvergedTo({getattr(self.f, '__name__', self.f)}, "
            f"{self.tol}, {self.goal}, {self.every})"
        )


class Breaker(LearningStrategy):
    """Stop learning when `f(model, i)` returns true."""

    def __init__(self, f: Callable[[Any, int], Any]):
        self.f = f

    def finished(self, model: Any, data: Any, i: int) -> bool:
        return bool(self.f(model, i))

    def __repr__(self) -> str:
        return f"Breaker({getattr(self.f, '__name__', self.f)})"
