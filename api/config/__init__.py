"""Configuration module for the Fireworks API."""

from .config_loader import get_config, reload_config
from .models import DatabaseConfig, UploadConfig

__all__ = ['get_config', 'reload_config', 'DatabaseConfig', 'UploadConfig']
