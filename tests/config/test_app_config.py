#!filepath: tests/config/test_app_config.py
from pathlib import Path

import pytest
from pydantic import ValidationError

from learning_strategies import AppConfig, LearnMode
from learning_strategies.config.learn_config import LearnConfig
from learning_strategies.config.log_config import LogConfig


def test_load_default_base_yml(monkeypatch):
    monkeypatch.delenv("LEARNING_LOG_LEVEL", raising=False)
    cfg = AppConfig.load()

    assert cfg.log.level == "INFO"
    assert cfg.learn.mode is LearnMode.ONLINE
    assert [s["type"] for s in cfg.learn.strategies] == ["maxiter", "timelimit"]


def test_load_custom_yaml(tmp_path: Path, monkeypatch):
    monkeypatch.delenv("LEARNING_LOG_LEVEL", raising=False)
    p = tmp_path / "cfg.yml"
    p.write_text(
        "learn:\n"
        "  mode: offline\n"
        "  verbose: true\n"
        "  strategies:\n"
        "    - type: maxiter\n"
        "      n: 3\n",
        encoding="utf-8",
    )

    cfg = AppConfig.load(str(p))

    assert cfg.learn.mode is LearnMode.OFFLINE
    assert cfg.learn.verbose is True
    assert cfg.learn.strategies == [{"type": "maxiter", "n": 3}]
    # 未配置的 section 使用默认值
    assert cfg.log == LogConfig()


def test_env_overrides_log_level(tmp_path: Path, monkeypatch):
    p = tmp_path / "cfg.yml"
    p.write_text("log:\n  level: INFO\n", encoding="utf-8")
    monkeypatch.setenv("LEARNING_LOG_LEVEL", "DEBUG")

    assert AppConfig.load(str(p)).log.level == "DEBUG"


def test_empty_yaml_gives_defaults(tmp_path: Path, monkeypatch):
    monkeypatch.delenv("LEARNING_LOG_LEVEL", raising=False)
    p = tmp_path / "empty.yml"
    p.write_text("", encoding="utf-8")

    cfg = AppConfig.load(str(p))
    assert cfg.learn == LearnConfig()


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        AppConfig.load(str(tmp_path / "nope.yml"))


def test_invalid_mode_raises(tmp_path: Path):
    p = tmp_path / "bad.yml"
    p.write_text("learn:\n  mode: batch\n", encoding="utf-8")

    with pytest.raises(ValidationError):
        AppConfig.load(str(p))


def test_strategy_entry_requires_type():
    with pytest.raises(ValidationError):
        LearnConfig(strategies=[{"n": 3}])
