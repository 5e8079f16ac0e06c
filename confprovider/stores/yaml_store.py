"""
YAML File Settings Store

Reads settings from a YAML document shaped as sections of key/value pairs:

    AppSettings:
      EmailTemplatesPath: Templates\\Emails
      NotifyOnUpload: true
"""

import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

import yaml

from confprovider.stores.base_store import SettingsStore, make_setting_key
from confprovider.utils.logger import get_logger

logger = get_logger(__name__)


def to_raw_value(value: str) -> Optional[str]:
    """An empty scalar (`Key:` or `Key: ""`) is a missing setting."""
    return value if value != '' else None


class YamlFileSettingsStore(SettingsStore):
    """Settings store backed by a YAML file."""

    def __init__(self, path):
        super().__init__()
        self.path = Path(path)

    def _read_document(self) -> dict:
        with open(self.path) as f:
            # BaseLoader keeps every scalar as written: no yes/on/off booleans, octals or dates
            document = yaml.load(f, Loader=yaml.BaseLoader) or {}
        if not isinstance(document, dict):
            raise ValueError(f"Settings file {self.path} must contain a mapping of sections")
        return document

    def _read_all(self) -> Dict[str, Optional[str]]:
        data = {}
        for section, entries in self._read_document().items():
            if not isinstance(entries, dict):
                raise ValueError(f"Section {section!r} in {self.path} must be a mapping of keys to values")
            for key, value in entries.items():
                if not isinstance(value, str):
                    raise ValueError(f"Setting {section}:{key} in {self.path} must be a single value")
                data[make_setting_key(str(section), str(key))] = to_raw_value(value)
        return data

    def _write(self, section: str, key: str, value: Optional[str]) -> None:
        document = self._read_document() if self.path.exists() else {}
        document.setdefault(section, {})[key] = '' if value is None else value

        # Write to a sibling temp file and swap it in so readers never see a partial file
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix='.tmp')
        try:
            with os.fdopen(fd, 'w') as f:
                yaml.safe_dump(document, f, default_flow_style=False, sort_keys=False)
            os.replace(tmp_name, self.path)
        except Exception:
            logger.error(f"Discarding partial write of {section}:{key} to {self.path}")
            os.unlink(tmp_name)
            raise

    def __repr__(self) -> str:
        return f"YamlFileSettingsStore({self.path})"
