#!filepath: learning_strategies/observability/timeline_reporter.py
from typing import Dict, Mapping, Optional

from learning_strategies.utils.logger import logs


class TimelineReporter:
    """
    Learn timeline 报告（按累计耗时降序）：

        callback                       calls    total    share
        Tracer.hook                      100   0.120s    60.0%
    """

    def __init__(
        self,
        timeline: Dict[str, float],
        label: str,
        counts: Optional[Mapping[str, int]] = None,
    ):
        self.timeline = timeline
        self.label = label
        self.counts = counts or {}

    def rows(self):
        total = sum(self.timeline.values())
        for name, sec in sorted(self.timeline.items(), key=lambda kv: kv[1], reverse=True):
            share = (sec / total * 100.0) if total > 0 else 0.0
            yield str(name), self.counts.get(name), sec, share

    def print(self):
        logs.info(f"[Timeline] ===== Learn timeline for {self.label} =====")

        total = 0.0
        for name, calls, sec, share in self.rows():
            calls_str = "-" if calls is None else str(calls)
            logs.info(f"[Timeline] {name:<30} {calls_str:>8} {sec:>8.3f}s {share:>6.1f}%")
            total += sec

        logs.info(f"[Timeline] Total{'':<36} {total:>8.3f}s")
