"""
Typed configuration provider.

Reads raw "section:key" settings from a backing store and exposes them as
validated, strongly typed properties.
"""

from confprovider.providers import ConfigurationProvider, ConfigurationProviderBase, ConnectionInfo
from confprovider.stores import DatabaseSettingsStore, InMemorySettingsStore, YamlFileSettingsStore
from confprovider.utils.exceptions import ConfigurationSettingError, SettingKeyFormatError

__version__ = '0.1.0'

__all__ = [
    'ConfigurationProvider',
    'ConfigurationProviderBase',
    'ConnectionInfo',
    'DatabaseSettingsStore',
    'InMemorySettingsStore',
    'YamlFileSettingsStore',
    'ConfigurationSettingError',
    'SettingKeyFormatError',
]
