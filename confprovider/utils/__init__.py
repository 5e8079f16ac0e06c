"""
Utility Modules

Common utilities for the configuration provider.

Modules:
    - logger: Structured logging setup
    - exceptions: Custom exception types
"""

from confprovider.utils.logger import get_logger, setup_logging
from confprovider.utils.exceptions import (
    ConfigurationProviderError,
    ConfigurationSettingError,
    SettingKeyFormatError,
    StoreNotLoadedError,
)

__all__ = [
    'get_logger',
    'setup_logging',
    'ConfigurationProviderError',
    'ConfigurationSettingError',
    'SettingKeyFormatError',
    'StoreNotLoadedError',
]
