"""In-memory settings store."""

from typing import Dict, Mapping, Optional

from confprovider.stores.base_store import SettingsStore, make_setting_key


class InMemorySettingsStore(SettingsStore):
    """
    Settings held in a plain dict keyed "section:key".

    The dict plays the part of the source table: load() snapshots it and
    set() writes into it, so writes show up after the next load().
    """

    def __init__(self, source: Optional[Mapping[str, Optional[str]]] = None):
        super().__init__()
        self.source: Dict[str, Optional[str]] = dict(source or {})

    def _read_all(self) -> Dict[str, Optional[str]]:
        return dict(self.source)

    def _write(self, section: str, key: str, value: Optional[str]) -> None:
        self.source[make_setting_key(section, key)] = value

    def __repr__(self) -> str:
        return f"InMemorySettingsStore({len(self.source)} settings)"
