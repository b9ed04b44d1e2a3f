#!filepath: learning_strategies/strategies/tracer.py
from __future__ import annotations

from typing import Any, Callable, List, Sequence

import pandas as pd

from learning_strategies.core.base import LearningStrategy


class Tracer(LearningStrategy):
    """
    Store `f(model, i)` every `every` iterations in `storage`.

    storage 不在 setup 中清空：同一个 Tracer 跨多次 learn 会累积。
    """

    def __init__(self, f: Callable[[Any, int], Any], every: int = 1):
        if every < 1:
            raise ValueError(f"[Tracer] every must be >= 1, got {every}")
        self.f = f
        self.every = int(every)
        self.storage: List[Any] = []

    def hook(self, model: Any, data: Any, i: int) -> None:
        if i % self.every == 0:
            self.storage.append(self.f(model, i))

    def __repr__(self) -> str:
        return f"Tracer({self.every}, {getattr(self.f, '__name__', self.f)}, n={len(self.storage)})"


class DataFrameTracer(LearningStrategy):
    """
    Tabular tracer: `f(model, i)` returns one row (sequence matching
    `columns`), recorded every `every` iterations.

    Rows are buffered as lists; `df` builds the DataFrame on access.
    """

    def __init__(
        self,
        columns: Sequence[str],
        f: Callable[[Any, int], Sequence[Any]],
        every: int = 1,
        dtypes: dict | None = None,
    ):
        if every < 1:
            raise ValueError(f"[DataFrameTracer] every must be >= 1, got {every}")
        self.columns = list(columns)
        self.f = f
        self.every = int(every)
        self.dtypes = dtypes
        self.rows: List[List[Any]] = []

    def hook(self, model: Any, data: Any, i: int) -> None:
        if i % self.every != 0:
            return

        row = list(self.f(model, i))
        if len(row) != len(self.columns):
            raise ValueError(
                f"[DataFrameTracer] row has {len(row)} values, "
                f"expected {len(self.columns)} ({self.columns})"
            )
        self.rows.append(row)

    @property
    def df(self) -> pd.DataFrame:
        df = pd.DataFrame(self.rows, columns=self.columns)
        if self.dtypes:
            df = df.astype(self.dtypes)
        return df

    def __repr__(self) -> str:
        return f"DataFrameTracer({self.columns}, every={self.every}, rows={len(self.rows)})"
