#!filepath: learning_strategies/strategies/factory.py
from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Type

from learning_strategies.core.base import LearningStrategy
from learning_strategies.core.meta import MetaStrategy
from learning_strategies.strategies.callbacks import IterFunction, ShowStatus
from learning_strategies.strategies.stopping import Breaker, MaxIter, TimeLimit
from learning_strategies.utils.errors import StrategyConfigError


class StrategyFactory:
    """
    StrategyFactory (FINAL / FROZEN)

    注册式 Strategy 构造器（配置驱动）

    Only strategies whose parameters are plain values can be built from
    config. Callable-based strategies (Tracer, Converged, ...) are built in
    code.

    Registration is centralized and static.
    """

    _REGISTRY: Dict[str, Type[LearningStrategy]] = {
        "maxiter": MaxIter,
        "timelimit": TimeLimit,
        "show_status": ShowStatus,
    }

    # --------------------------------------------------
    @classmethod
    def create(cls, cfg: Dict[str, Any]) -> LearningStrategy:
        """
        cfg: 单个 strategy 配置（完整 dict）

        冻结规则：
          - cfg["type"] 必须存在
          - 未注册 type -> StrategyConfigError
          - 参数不匹配 -> StrategyConfigError
        """
        if "type" not in cfg:
            raise StrategyConfigError("[StrategyFactory] missing 'type' in strategy config")

        typ = cfg["type"]

        if typ not in cls._REGISTRY:
            raise StrategyConfigError(
                f"[StrategyFactory] unknown strategy type: {typ} "
                f"(known: {sorted(cls._REGISTRY)})"
            )

        strategy_cls = cls._REGISTRY[typ]

        # type 字段不传给 Strategy 本体
        params = {k: v for k, v in cfg.items() if k != "type"}

        try:
            return strategy_cls(**params)
        except (TypeError, ValueError) as e:
            raise StrategyConfigError(
                f"[StrategyFactory] bad params for {typ}: {params} ({e})"
            ) from e

    @classmethod
    def registered(cls) -> list[str]:
        return sorted(cls._REGISTRY)


def make_strategy(
    *strategies: LearningStrategy,
    maxiter: Optional[int] = None,
    oniter: Optional[Callable[[Any, int], Any]] = None,
    converged: Optional[Callable[[Any, int], Any]] = None,
) -> MetaStrategy:
    """
    Keyword shortcut:

        make_strategy(s, maxiter=20, oniter=f, converged=g)
        == MetaStrategy(s, MaxIter(20), IterFunction(f), Breaker(g))
    """
    extra = []
    if maxiter is not None:
        extra.append(MaxIter(maxiter))
    if oniter is not None:
        extra.append(IterFunction(oniter))
    if converged is not None:
        extra.append(Breaker(converged))
    return MetaStrategy(*strategies, *extra)
