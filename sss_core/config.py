# sss_core/config.py
"""
调用方可选的运行配置（环境变量 / .env）

  SSS_H2C_MAX_ATTEMPTS=256    # hash_to_point 最大尝试次数

库内函数从不读取这里的配置；需要时由调用方显式加载并传参：

    settings = load_settings()
    q = hash_to_point(tag, max_attempts=settings.h2c_max_attempts)
"""
import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import dotenv_values, find_dotenv

from .hashing import DEFAULT_MAX_ATTEMPTS

logger = logging.getLogger(__name__)

DEFAULT_H2C_MAX_ATTEMPTS = DEFAULT_MAX_ATTEMPTS


@dataclass(frozen=True)
class Settings:
    h2c_max_attempts: int = DEFAULT_H2C_MAX_ATTEMPTS


def _read_dotenv(path: Optional[str]) -> dict:
    # 只读取文件，不写入 os.environ
    if path is None:
        path = find_dotenv(usecwd=True)
    if not path:
        return {}
    logger.debug(".env read from: %s", path)
    return {k: v for k, v in dotenv_values(path).items() if v is not None}


def _int_setting(values: dict, name: str, default: int) -> int:
    raw = (values.get(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    """Build Settings from a .env file overlaid by the process environment (env wins)."""
    values = _read_dotenv(dotenv_path)
    values.update({k: v for k, v in os.environ.items() if k.startswith("SSS_")})

    max_attempts = _int_setting(values, "SSS_H2C_MAX_ATTEMPTS", DEFAULT_H2C_MAX_ATTEMPTS)
    if max_attempts < 1:
        raise ValueError("SSS_H2C_MAX_ATTEMPTS must be >= 1")

    return Settings(h2c_max_attempts=max_attempts)
