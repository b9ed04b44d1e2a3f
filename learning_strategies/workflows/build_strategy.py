#!filepath: learning_strategies/workflows/build_strategy.py
from __future__ import annotations

from typing import Optional, Sequence

from learning_strategies.config.app_config import AppConfig
from learning_strategies.config.learn_config import LearnConfig
from learning_strategies.core.base import LearningStrategy
from learning_strategies.core.learn import learn
from learning_strategies.core.meta import MetaStrategy
from learning_strategies.strategies.factory import StrategyFactory
from learning_strategies.strategies.verbose import Verbose
from learning_strategies.utils.logger import logs


def build_strategy(cfg: LearnConfig, *extra: LearningStrategy) -> MetaStrategy:
    """
    Config-driven MetaStrategy.

    Order (LAW):
        config strategies (in file order) → extra (in argument order)

    `cfg.verbose` wraps every config strategy in Verbose; `extra` is used
    as given.
    """
    children = []
    for entry in cfg.strategies:
        s = StrategyFactory.create(entry)
        if cfg.verbose:
            s = Verbose(s)
        children.append(s)

    meta = MetaStrategy(*children, *extra)
    logs.info(f"[build_strategy] {len(meta)} strategies, mode={cfg.mode.value}")
    return meta


@logs.catch("learn run from config failed")
def run_from_config(
    model,
    data=None,
    *,
    cfg: Optional[AppConfig] = None,
    extra: Sequence[LearningStrategy] = (),
):
    """
    加载配置 → 构造 MetaStrategy → learn。

    Callback 异常会被记录（logs.exception）后原样抛出。

    `data=None` means the no-data form (online only).
    """
    cfg = cfg if cfg is not None else AppConfig.load()
    meta = build_strategy(cfg.learn, *extra)

    if data is None:
        return learn(model, meta, mode=cfg.learn.mode)
    return learn(model, meta, data, cfg.learn.mode)
