# learning_strategies/config/learn_config.py
from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator

from learning_strategies.core.learn import LearnMode


class LearnConfig(BaseModel):
    mode: LearnMode = LearnMode.ONLINE
    verbose: bool = False
    # 每项: {"type": "maxiter", "n": 100}
    strategies: List[Dict[str, Any]] = Field(default_factory=list)

    @field_validator("strategies")
    @classmethod
    def _require_type(cls, v: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        for idx, entry in enumerate(v):
            if "type" not in entry:
                raise ValueError(f"strategies[{idx}] missing 'type'")
        return v
