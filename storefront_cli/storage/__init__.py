"""
Storage Layer.

This package handles the configuration file.
"""

from .config_manager import ConfigManager

__all__ = ["ConfigManager"]
