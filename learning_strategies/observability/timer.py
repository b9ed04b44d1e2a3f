#!filepath: learning_strategies/observability/timer.py
import time
from typing import Dict


class Timer:
    """
    高精度计时器（按 name 计时）
    - start(name)
    - end(name) → 返回耗时秒数
    - 同名重复 start 会覆盖起点；未 start 的 end 返回 0.0
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._start: Dict[str, float] = {}

    def start(self, name: str) -> None:
        if not self.enabled:
            return
        self._start[name] = time.perf_counter()

    def end(self, name: str) -> float:
        if not self.enabled:
            return 0.0
        started = self._start.pop(name, None)
        if started is None:
            return 0.0
        return time.perf_counter() - started

    def running(self) -> list[str]:
        return list(self._start)
