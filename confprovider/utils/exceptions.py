"""
Custom Exception Types

Specific exceptions for configuration access and backing store errors.
"""


class ConfigurationProviderError(Exception):
    """Base exception for the configuration provider."""
    pass


class ConfigurationSettingError(ConfigurationProviderError):
    """A setting is missing, blank, or holds a value that cannot be used."""
    pass


class SettingKeyFormatError(ConfigurationProviderError, ValueError):
    """A setting key is not in the form section:key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"The parameter named key, Must be in the form: section:key. Got: {key!r}")


class StoreNotLoadedError(ConfigurationProviderError):
    """Settings were read before the store was successfully loaded."""
    pass
