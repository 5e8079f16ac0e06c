"""
Settings Stores

Backing sources of raw "section:key" settings.
"""

from confprovider.stores.base_store import (
    SettingsStore,
    StoreState,
    make_setting_key,
    parse_setting_key,
)
from confprovider.stores.memory_store import InMemorySettingsStore
from confprovider.stores.database_store import DatabaseSettingsStore
from confprovider.stores.yaml_store import YamlFileSettingsStore

__all__ = [
    'SettingsStore',
    'StoreState',
    'make_setting_key',
    'parse_setting_key',
    'InMemorySettingsStore',
    'DatabaseSettingsStore',
    'YamlFileSettingsStore',
]
