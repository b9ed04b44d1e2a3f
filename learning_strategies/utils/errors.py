# learning_strategies/utils/errors.py
class StrategyConfigError(ValueError):
    """
    Raised for an invalid strategy entry in config (missing / unknown type,
    bad params). The learn loop itself never raises this.
    """
