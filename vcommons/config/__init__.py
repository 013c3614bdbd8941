"""Configuration management for Verus Commons."""

from .loader import Config, default_config_path, load_config, save_config
from .models import ConfigModel, FeaturedConfig, FeedConfig, GitHubConfig

__all__ = [
    "Config",
    "ConfigModel",
    "FeaturedConfig",
    "FeedConfig",
    "GitHubConfig",
    "default_config_path",
    "load_config",
    "save_config",
]
