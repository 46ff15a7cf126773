"""Data models."""

from .config import DEFAULT_CONFIG_PATH, AppConfig

__all__ = ["AppConfig", "DEFAULT_CONFIG_PATH"]
