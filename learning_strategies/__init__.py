#!filepath: learning_strategies/__init__.py
"""Composable learning strategies and the `learn` control loop."""

from .utils.logger import Logging, init_logging, logs
from .core import (
    InfiniteNothing,
    LearnMode,
    LearningStrategy,
    MetaStrategy,
    OFFLINE,
    ONLINE,
    Offline,
    learn,
    strategy,
)
from .strategies import (
    Breaker,
    Converged,
    ConvergedTo,
    DataFrameTracer,
    Instrumented,
    IterFunction,
    MaxIter,
    ShowStatus,
    StrategyFactory,
    TimeLimit,
    Tracer,
    Verbose,
    make_strategy,
)
from .config.app_config import AppConfig

__version__ = "0.1.0"

__all__ = [
    "logs", "Logging", "init_logging",
    "LearningStrategy", "MetaStrategy", "strategy",
    "learn", "LearnMode", "ONLINE", "OFFLINE", "Offline", "InfiniteNothing",
    "MaxIter", "TimeLimit", "Converged", "ConvergedTo", "Breaker",
    "IterFunction", "ShowStatus", "Tracer", "DataFrameTracer",
    "Verbose", "Instrumented",
    "StrategyFactory", "make_strategy",
    "AppConfig",
]
