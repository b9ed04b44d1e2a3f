#!filepath: learning_strategies/core/meta.py
from __future__ import annotations

from typing import Any, Iterator, Tuple

from learning_strategies.core.base import LearningStrategy
from learning_strategies.utils.logger import logs


class MetaStrategy(LearningStrategy):
    """
    MetaStrategy = 组合策略（Composite）

    Invariants:
    - children 在构造时固定（tuple），不可原地修改
    - 所有 fan-out 严格按 children 顺序执行，每次调用访问全部 children
    - 前面 child 的副作用对后面 child 可见（顺序即语义）
    - finished = OR(children)，但每个 child 的 finished 都会被调用

    An empty MetaStrategy is legal but never finishes on its own.
    """

    def __init__(self, *strategies: LearningStrategy):
        for s in strategies:
            if not isinstance(s, LearningStrategy):
                raise TypeError(
                    f"[MetaStrategy] expected LearningStrategy, got {type(s).__name__}"
                )

        self.strategies: Tuple[LearningStrategy, ...] = tuple(strategies)

        if not self.strategies:
            logs.warning(
                "[MetaStrategy] empty composite: finished() is always False, "
                "the loop only stops when data is exhausted"
            )

    # --------------------------------------------------
    # Fan-out
    # --------------------------------------------------
    def setup(self, model: Any, data: Any) -> None:
        for s in self.strategies:
            s.setup(model, data)

    def update(self, model: Any, i: int, item: Any) -> None:
        for s in self.strategies:
            s.update(model, i, item)

    def hook(self, model: Any, data: Any, i: int) -> None:
        for s in self.strategies:
            s.hook(model, data, i)

    def finished(self, model: Any, data: Any, i: int) -> bool:
        # 不短路：后面的 child 可能在 finished 中有观测副作用
        results = [s.finished(model, data, i) for s in self.strategies]
        return any(results)

    def cleanup(self, model: Any) -> None:
        for s in self.strategies:
            s.cleanup(model)

    # --------------------------------------------------
    # Container protocol
    # --------------------------------------------------
    def __len__(self) -> int:
        return len(self.strategies)

    def __iter__(self) -> Iterator[LearningStrategy]:
        return iter(self.strategies)

    def __getitem__(self, idx: int) -> LearningStrategy:
        return self.strategies[idx]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MetaStrategy):
            return NotImplemented
        return self.strategies == other.strategies

    def __hash__(self) -> int:
        return hash(self.strategies)

    def __repr__(self) -> str:
        lines = ["MetaStrategy"]
        lines.extend(f"  > {s!r}" for s in self.strategies)
        return "\n".join(lines)


def strategy(*strategies: LearningStrategy) -> MetaStrategy:
    """
    Compose strategies into a MetaStrategy.

        strategy(a, b, c)            -> MetaStrategy(a, b, c)
        strategy(existing_meta, c)   -> MetaStrategy(*existing_meta, c)

    The second form never touches `existing_meta`; a new composite is built.
    """
    if strategies and isinstance(strategies[0], MetaStrategy):
        head, *rest = strategies
        return MetaStrategy(*head.strategies, *rest)
    return MetaStrategy(*strategies)
