"""Configuration provider that reads settings from a SettingsStore."""

from typing import Optional

from confprovider.providers.base_provider import ConfigurationProviderBase
from confprovider.providers.connection import ConnectionInfo
from confprovider.stores.base_store import SettingsStore, make_setting_key

DEFAULT_SECTION = 'AppSettings'
DEFAULT_PROVIDER_NAME = 'sqlalchemy'


class ConfigurationProvider(ConfigurationProviderBase):
    """
    Typed settings read from one section of a settings store.

    Args:
        store: Loaded store the raw values come from
        section: Section holding the application settings
        provider_name: Provider reported with database connection information
    """

    def __init__(
        self,
        store: SettingsStore,
        section: str = DEFAULT_SECTION,
        provider_name: str = DEFAULT_PROVIDER_NAME,
    ):
        self.store = store
        self.section = section
        self.provider_name = provider_name

    def get_setting_value(self, key: str) -> Optional[str]:
        return self.store.get(make_setting_key(self.section, key))

    def get_db_connection_information_core(self, connection_name: str) -> ConnectionInfo:
        connection_string = self.get_required_setting_value(connection_name)
        return ConnectionInfo(
            name=connection_name,
            connection_string=connection_string,
            provider_name=self.provider_name,
        )
