#!filepath: learning_strategies/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .learn_config import LearnConfig
from .log_config import LogConfig


def project_root() -> str:
    """
    返回项目根目录（基于当前文件位置推导）:
    learning_strategies/config/app_config.py → learning_strategies/config
    → learning_strategies → project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    learn: LearnConfig = Field(default_factory=LearnConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 learning_strategies/config/base.yml
        - 不依赖当前工作目录
        - LEARNING_LOG_LEVEL 覆盖 log.level
        """
        root = project_root()

        # 1) 先加载 .env（在项目根目录下）
        load_dotenv(os.path.join(root, ".env"))

        # 2) 决定配置文件路径
        if path is None:
            path = os.path.join(os.path.dirname(__file__), "base.yml")

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # 4) env 覆盖
        level = os.getenv("LEARNING_LOG_LEVEL")
        if level:
            raw["log"] = {**(raw.get("log") or {}), "level": level}

        return cls(**raw)
