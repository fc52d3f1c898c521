"""Configuration management for QuickDict."""

from .config import QuickDictConfig
from .defaults import create_default_config

__all__ = ["QuickDictConfig", "create_default_config"]
