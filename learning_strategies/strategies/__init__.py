#!filepath: learning_strategies/strategies/__init__.py
from .callbacks import IterFunction, ShowStatus
from .factory import StrategyFactory, make_strategy
from .instrumented import Instrumented
from .stopping import Breaker, Converged, ConvergedTo, MaxIter, TimeLimit
from .tracer import DataFrameTracer, Tracer
from .verbose import Verbose

__all__ = [
    "MaxIter",
    "TimeLimit",
    "Converged",
    "ConvergedTo",
    "Breaker",
    "IterFunction",
    "ShowStatus",
    "Tracer",
    "DataFrameTracer",
    "Verbose",
    "Instrumented",
    "StrategyFactory",
    "make_strategy",
]
