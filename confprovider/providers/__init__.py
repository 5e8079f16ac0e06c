"""
Configuration Providers

Strongly typed, validated access to settings held in a store.
"""

from confprovider.providers.connection import ConnectionInfo
from confprovider.providers.base_provider import ConfigurationProviderBase, SettingState, classify_setting
from confprovider.providers.store_provider import ConfigurationProvider
from confprovider.providers.factory import build_provider, build_store

__all__ = [
    'ConnectionInfo',
    'ConfigurationProviderBase',
    'SettingState',
    'classify_setting',
    'ConfigurationProvider',
    'build_provider',
    'build_store',
]
