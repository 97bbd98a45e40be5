"""
Localization lookup backed by JSON tables

Each language lives in <LOCALIZATION_DIR>/<lang>.json as nested objects.
Lookups fall back to default.json, then to the key path itself.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "default"


class Localization:
    """Loads every language table from a directory once"""

    def __init__(self, directory: Path):
        self.directory = Path(directory)
        self.tables: Dict[str, Dict[str, Any]] = {}
        self._load()

    def _load(self):
        if not self.directory.is_dir():
            logger.warning(f"Localization directory not found: {self.directory}")
            return
        for path in sorted(self.directory.glob("*.json")):
            with path.open(encoding="utf-8") as f:
                self.tables[path.stem.lower()] = json.load(f)
        logger.info(f"Loaded localization tables: {', '.join(self.tables) or 'none'}")

    @staticmethod
    def _lookup(table: Optional[Dict[str, Any]], keys) -> Optional[str]:
        node: Any = table
        for key in keys:
            if not isinstance(node, dict) or key not in node:
                return None
            node = node[key]
        return node if isinstance(node, str) else None

    def get(self, lang: str, *keys: str) -> str:
        """
        Translate a key path for a language

        Args:
            lang: Language code, e.g. "en" or "es"
            keys: Path into the table, e.g. ("welcome", "title")

        Returns:
            The translated string, the default-language string, or the
            dotted key path when neither table has it
        """
        value = self._lookup(self.tables.get(lang.lower()), keys)
        if value is None:
            value = self._lookup(self.tables.get(DEFAULT_LANGUAGE), keys)
        if value is None:
            value = ".".join(keys)
        return value
