"""Base settings store contract shared by every backing source."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Optional, Tuple

from confprovider.utils.exceptions import SettingKeyFormatError, StoreNotLoadedError
from confprovider.utils.logger import get_logger

logger = get_logger(__name__)

KEY_DELIMITER = ':'


class StoreState(Enum):
    """Lifecycle of a store snapshot."""
    UNLOADED = 'unloaded'
    LOADED = 'loaded'
    FAILED = 'failed'


def make_setting_key(section: str, key: str) -> str:
    return f"{section}{KEY_DELIMITER}{key}"


def fold_setting_key(key: str) -> str:
    """Snapshot lookups ignore letter case, so "appsettings:foo" finds "AppSettings:Foo"."""
    return key.casefold()


def parse_setting_key(key: str) -> Tuple[str, str]:
    """
    Split a "section:key" string into its two parts.

    Raises:
        SettingKeyFormatError: If the key is not exactly two non-empty
            parts separated by a single delimiter
    """
    parts = key.split(KEY_DELIMITER) if isinstance(key, str) else []
    if len(parts) != 2 or not all(parts):
        raise SettingKeyFormatError(key)
    return parts[0], parts[1]


class SettingsStore(ABC):
    """
    Source of raw setting values.

    A store reads every row from its source on load() and serves get()
    from that snapshot until the next load(). set() writes straight to the
    source and is not visible to get() until the store is loaded again.
    """

    def __init__(self):
        self._data: Dict[str, Optional[str]] = {}
        self._state = StoreState.UNLOADED

    @property
    def state(self) -> StoreState:
        return self._state

    @abstractmethod
    def _read_all(self) -> Dict[str, Optional[str]]:
        """Read every setting from the source, keyed "section:key"."""

    @abstractmethod
    def _write(self, section: str, key: str, value: Optional[str]) -> None:
        """Persist one setting as a single all-or-nothing write."""

    def load(self) -> None:
        """Replace the snapshot with the current contents of the source."""
        try:
            data = self._read_all()
        except Exception as e:
            self._data = {}
            self._state = StoreState.FAILED
            logger.error(f"Failed to load settings from {self}", extra={
                'store': type(self).__name__,
                'error': str(e),
                'error_type': type(e).__name__,
            })
            raise

        snapshot = {}
        for key, value in data.items():
            folded = fold_setting_key(key)
            if folded in snapshot:
                logger.warning(f"Setting {key} differs from another key only by letter case; the later row wins",
                               extra={'store': type(self).__name__, 'key': key})
            snapshot[folded] = value

        self._data = snapshot
        self._state = StoreState.LOADED
        logger.info(f"Loaded {len(snapshot)} settings from {self}", extra={
            'store': type(self).__name__,
            'settings': len(snapshot),
        })

    def get(self, key: str) -> Optional[str]:
        """Return the raw value for key (any letter case), or None when it is absent."""
        if self._state is not StoreState.LOADED:
            raise StoreNotLoadedError(
                f"Settings store {self} is {self._state.value}; call load() before reading {key}"
            )
        return self._data.get(fold_setting_key(key))

    def set(self, key: str, value: Optional[str]) -> None:
        """
        Persist a new setting.

        Args:
            key: Setting key in the form section:key, e.g. "AppSettings:NotifyOnUpload"
            value: Raw setting value

        Raises:
            SettingKeyFormatError: If key is malformed. Nothing is written.
        """
        section, name = parse_setting_key(key)
        self._write(section, name, value)
        logger.info(f"Stored setting {key}", extra={'store': type(self).__name__, 'key': key})

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
