#!filepath: learning_strategies/core/learn.py
from __future__ import annotations

from enum import Enum
from itertools import repeat
from typing import Any, Iterable, Iterator

from learning_strategies.core.base import LearningStrategy
from learning_strategies.utils.logger import logs

"""
learn (FINAL / FROZEN)

    setup(strategy, model, data)
    for i, item in enumerate(data, start=1):
        update(model, strategy, i, item)
        hook(strategy, model, data, i)
        if finished(strategy, model, data, i): break
    cleanup(strategy, model)

Invariants:
- termination 只在 body 之后检查，第 i 轮的 update / hook 必定执行完
- setup / cleanup 每次 run 各调用一次（异常时不调用 cleanup）
- 不捕获、不转换任何 callback 异常
- 无安全上限：无限数据 + 永不 finished = 调用方配置错误
"""


class LearnMode(str, Enum):
    ONLINE = "online"
    OFFLINE = "offline"


ONLINE = LearnMode.ONLINE
OFFLINE = LearnMode.OFFLINE


class Offline:
    """
    Offline(data)

    Iterable that yields the same `data` forever. Online `learn` over
    `Offline(data)` hands the whole dataset to every iteration.
    `Offline(a, b)` wraps the tuple `(a, b)`.
    """

    def __init__(self, *data: Any):
        self.data = data[0] if len(data) == 1 else data

    def __iter__(self) -> Iterator[Any]:
        return repeat(self.data)

    def __repr__(self) -> str:
        return f"Offline({self.data!r})"


class InfiniteNothing:
    """Restartable, infinite stream of `None` (learn without input data)."""

    def __iter__(self) -> Iterator[None]:
        return repeat(None)

    def __repr__(self) -> str:
        return "InfiniteNothing()"


_NO_DATA = object()


def learn(
    model: Any,
    strategy: LearningStrategy,
    data: Any = _NO_DATA,
    mode: LearnMode | str = LearnMode.ONLINE,
) -> Any:
    """
    Learn `model` from `data` using `strategy`; returns the same `model`.

    learn(model, strategy)                 -> online over InfiniteNothing()
    learn(model, strategy, data)           -> one item per iteration
    learn(model, strategy, data, OFFLINE)  -> whole `data` every iteration
    """
    mode = LearnMode(mode)

    if data is _NO_DATA:
        if mode is LearnMode.OFFLINE:
            raise ValueError("[learn] offline mode requires data")
        data = InfiniteNothing()

    logs.debug(f"[learn] start mode={mode.value} strategy={strategy!r}")

    if mode is LearnMode.OFFLINE:
        n, stopped = _learn_offline(model, strategy, data)
    else:
        n, stopped = _learn_online(model, strategy, data)

    logs.debug(
        f"[learn] done iterations={n} "
        f"reason={'finished' if stopped else 'exhausted'}"
    )
    return model


# --------------------------------------------------
# 两种迭代模式
# --------------------------------------------------
def _learn_online(model: Any, strategy: LearningStrategy, data: Iterable) -> tuple[int, bool]:
    strategy.setup(model, data)

    n = 0
    stopped = False
    for i, item in enumerate(data, start=1):
        n = i
        strategy.update(model, i, item)
        strategy.hook(model, data, i)
        if strategy.finished(model, data, i):
            stopped = True
            break

    strategy.cleanup(model)
    return n, stopped


def _learn_offline(model: Any, strategy: LearningStrategy, data: Any) -> tuple[int, bool]:
    strategy.setup(model, data)

    i = 1
    while True:
        strategy.update(model, i, data)
        strategy.hook(model, data, i)
        if strategy.finished(model, data, i):
            break
        i += 1

    strategy.cleanup(model)
    return i, True
