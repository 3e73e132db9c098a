"""
File-backed settings store.

Holds the one piece of durable state in marketdesk: a JSON document with
user-supplied provider credentials and symbol aliases. The store is
created once by the application and injected into the request handlers.

Usage:
    from marketdesk.settings_store import SettingsStore
    store = SettingsStore("settings.json")
    store.write({"finnhubKey": "abc"})
    store.read()  # {'finnhubKey': 'abc'}
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Mapping, Union

logger = logging.getLogger(__name__)

ALLOWED_FIELDS = (
    "finnhubKey",
    "newsApiKey",
    "tradingEconomicsUser",
    "tradingEconomicsKey",
    "fxFactoryRss",
    "aliases",
)


class SettingsStore:
    """
    Reads and shallow-merges the settings JSON document.

    There is no locking: two concurrent writers race and the later write
    wins.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> Dict[str, Any]:
        """
        Return the persisted document.

        Returns:
            The parsed JSON object, or {} if the file is missing, not
            valid JSON, or not an object.
        """
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.debug(f"Settings unavailable at {self._path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.debug(f"Settings at {self._path} is not a JSON object, ignoring")
            return {}
        return data

    def merge(self, update: Mapping[str, Any]) -> Dict[str, Any]:
        """Whitelist ``update`` and lay it over the current document."""
        accepted = {k: update[k] for k in ALLOWED_FIELDS if k in update}
        merged = dict(self.read())
        merged.update(accepted)
        return merged

    def write(self, update: Mapping[str, Any]) -> bool:
        """
        Merge a partial update into the persisted document.

        Top-level keys in the update replace the stored ones; nested
        objects such as ``aliases`` are replaced wholesale.

        Returns:
            True on success, False if the file could not be written.
        """
        return self._save(self.merge(update))

    def _save(self, document: Dict[str, Any]) -> bool:
        tmp_name = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2)
            os.replace(tmp_name, self._path)
            return True
        except (OSError, TypeError, ValueError) as e:
            logger.warning(f"Failed to write settings: {e}")
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            return False
