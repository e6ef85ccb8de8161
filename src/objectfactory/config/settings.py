"""
# src/objectfactory/config/settings.py

Configuration management and reading, environment variable processing components

配置管理与读取, 环境变量处理组件
"""


from __future__ import annotations
from pathlib import Path
from dotenv import dotenv_values
from typing import Dict, Any, Optional
from .constants import CONSTANT_CONFIG
import logging
import os


logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "objectfactory"


def load_config(env_file: Optional[Path] = None) -> Dict[str, Any]:
    """
    Merge the defaults, the .env file and the process environment (later wins).

    params
    ------
    env_file: .env path, defaults to the one in the working directory

    return
    ------
    Flat configuration dictionary
    """

    config: Dict[str, Any] = dict(CONSTANT_CONFIG)
    env_path = env_file if env_file is not None else Path.cwd() / ".env"
    config.update({k: v for k, v in dotenv_values(env_path).items() if v is not None})
    config.update({k: os.environ[k] for k in CONSTANT_CONFIG if k in os.environ})
    return config


def configure_logging(level: Optional[str] = None) -> None:
    """
    Set the level of the package logger; a NullHandler keeps a library quiet by default
    """

    name = str(level if level is not None else CONFIG["OBJECTFACTORY_LOG_LEVEL"]).strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        logger.critical(f"The value *OBJECTFACTORY_LOG_LEVEL* is not a logging level: {name}")
        raise ValueError(f"The value *OBJECTFACTORY_LOG_LEVEL* is not a logging level: {name}")

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(isinstance(h, logging.NullHandler) for h in package_logger.handlers):
        package_logger.addHandler(logging.NullHandler())
    package_logger.setLevel(name)


CONFIG: Dict[str, Any] = load_config()


__all__ = ["CONFIG", "load_config", "configure_logging"]
