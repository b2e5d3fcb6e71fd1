"""Configuration module for suirpc."""

from suirpc.config.loader import load_config, save_config, get_config_path
from suirpc.config.schema import ClientConfig

__all__ = ["ClientConfig", "load_config", "save_config", "get_config_path"]
