"""Configuration module for libgit2dart_plugin."""

from libgit2dart_plugin.config.loader import load_config, save_config, get_config_path
from libgit2dart_plugin.config.schema import Config
from libgit2dart_plugin.config.access import get_config, clear_config_cache

__all__ = ["Config", "load_config", "save_config", "get_config_path", "get_config", "clear_config_cache"]
