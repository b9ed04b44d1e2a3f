#!filepath: learning_strategies/observability/metrics.py
from dataclasses import dataclass, field
from typing import Any, Dict

from learning_strategies.utils.logger import logs


@dataclass
class MetricRecorder:
    enabled: bool = True
    metrics: Dict[str, Any] = field(default_factory=dict)

    def record(self, name: str, value: Any):
        if not self.enabled:
            return
        self.metrics[name] = value
        logs.debug(f"[Metric] {name} = {value}")

    def incr(self, name: str, n: int = 1):
        # 热路径：不打日志
        if not self.enabled:
            return
        self.metrics[name] = self.metrics.get(name, 0) + n
