"""Configuration management."""

from searchmind.config.loader import get_config, load_config, reset_config
from searchmind.config.schema import SearchMindConfig

__all__ = ["SearchMindConfig", "get_config", "load_config", "reset_config"]
