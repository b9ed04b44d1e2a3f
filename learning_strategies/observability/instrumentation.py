#!filepath: learning_strategies/observability/instrumentation.py
from __future__ import annotations

from collections import OrderedDict
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict

from learning_strategies.observability.metrics import MetricRecorder
from learning_strategies.observability.timeline_reporter import TimelineReporter
from learning_strategies.observability.timer import Timer


@dataclass
class Instrumentation:
    """
    Instrumentation（累计式 timeline）

    设计铁律：
    1. 同名 timer 多次进入时耗时累加（每轮 callback 都会计时）
    2. record=False 的 timer 不产生任何副作用
    3. Instrumentation 本身不在热路径打日志
    """

    enabled: bool = True

    def __post_init__(self):
        self._timer = Timer(enabled=self.enabled)
        self.metrics = MetricRecorder(enabled=self.enabled)

        # timeline: OrderedDict[name, elapsed_seconds]
        self.timeline: Dict[str, float] = OrderedDict()

    # ---------------------------------------------------------
    # Context Manager Timer（唯一入口）
    # ---------------------------------------------------------
    @contextmanager
    def timer(self, name: str, *, record: bool = True):
        if not self.enabled:
            yield
            return

        self._timer.start(name)
        try:
            yield
        finally:
            elapsed = self._timer.end(name)
            if record:
                self.timeline[name] = self.timeline.get(name, 0.0) + elapsed

    # ---------------------------------------------------------
    # Timeline 输出（冷路径）
    # ---------------------------------------------------------
    def generate_timeline_report(self, label: str):
        TimelineReporter(self.timeline, label, counts=self.metrics.metrics).print()


class NoOpInstrumentation:
    """Instrumentation disabled 时使用。"""

    def __init__(self):
        self.metrics = MetricRecorder(enabled=False)
        self.timeline: Dict[str, float] = {}

    def timer(self, name: str, *, record: bool = True):
        return _NoOpTimer()

    def generate_timeline_report(self, label: str):
        pass


class _NoOpTimer:
    def __enter__(self):
        pass

    def __exit__(self, exc_type, exc, tb):
        pass
