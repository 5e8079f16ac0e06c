"""
Configuration Module

Pydantic-based application configuration with environment-aware loading.
"""

from confprovider.config.settings import Settings, StoreConfig, LoggingConfig, load_config, get_config

__all__ = ['Settings', 'StoreConfig', 'LoggingConfig', 'load_config', 'get_config']
