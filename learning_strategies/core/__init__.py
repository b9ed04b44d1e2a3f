#!filepath: learning_strategies/core/__init__.py
from .base import LearningStrategy
from .meta import MetaStrategy, strategy
from .learn import (
    InfiniteNothing,
    LearnMode,
    OFFLINE,
    ONLINE,
    Offline,
    learn,
)

__all__ = [
    "LearningStrategy",
    "MetaStrategy",
    "strategy",
    "learn",
    "LearnMode",
    "ONLINE",
    "OFFLINE",
    "Offline",
    "InfiniteNothing",
]
