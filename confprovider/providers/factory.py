"""Build stores and providers from application configuration."""

from confprovider.config.settings import Settings, StoreConfig
from confprovider.providers.store_provider import ConfigurationProvider
from confprovider.stores.base_store import SettingsStore
from confprovider.stores.database_store import DatabaseSettingsStore
from confprovider.stores.memory_store import InMemorySettingsStore
from confprovider.stores.yaml_store import YamlFileSettingsStore
from confprovider.utils.logger import get_logger

logger = get_logger(__name__)


def build_store(config: StoreConfig) -> SettingsStore:
    """Create an unloaded store for the configured backing source."""
    if config.kind == 'database':
        store = DatabaseSettingsStore(config.url, table_name=config.table)
    elif config.kind == 'yaml':
        store = YamlFileSettingsStore(config.path)
    else:
        store = InMemorySettingsStore()
    logger.debug(f"Built settings store {store}", extra={'kind': config.kind})
    return store


def build_provider(settings: Settings, load: bool = True) -> ConfigurationProvider:
    """
    Create a configuration provider over the configured store.

    Args:
        settings: Application settings
        load: Load the store before returning

    Returns:
        ConfigurationProvider reading from settings.store.section
    """
    store = build_store(settings.store)
    if load:
        store.load()
    return ConfigurationProvider(
        store,
        section=settings.store.section,
        provider_name=settings.store.provider_name,
    )
