from __future__ import annotations

"""
Internationalization (i18n) Utility.

Module-level singleton serving the user-facing strings of the CLI (help
texts, status lines, error and statistics messages) from nested JSON locale
files, addressed with dot-notation keys.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
LOCALES_DIR = os.path.abspath(
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "interface", "locales")
)


class I18n:
    """
    Locale dictionary with key lookup and str.format interpolation.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE, locales_dir: str = LOCALES_DIR):
        self._locale = locale
        self._locales_dir = locales_dir
        self._translations: Dict[str, Any] = {}
        self.is_loaded = False
        self.load_locale(locale)

    @property
    def locale(self) -> str:
        return self._locale

    def load_locale(self, locale: str) -> None:
        """
        Replace the active dictionary with `<locales_dir>/<locale>.json`.

        When the file is missing or unreadable the dictionary is emptied and
        every lookup falls back to its default or to the key.
        """
        file_path = os.path.join(self._locales_dir, f"{locale}.json")
        self._translations = {}
        self.is_loaded = False

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.warning(f"I18n: Locale resource missing at '{file_path}'. Fallback active.")
            return
        except (OSError, ValueError) as e:
            logger.error(f"I18n: Corruption in locale file {file_path}: {e}")
            return

        if isinstance(data, dict):
            self._translations = data
            self._locale = locale
            self.is_loaded = True
            logger.debug(f"I18n: Loaded locale dictionary: {locale}")

    def t(self, key: str, default: str = "", **kwargs: Any) -> str:
        """
        Resolve a message and interpolate keyword arguments into it.

        Args:
            key: Dot-separated path, e.g. 'cli.stats.title'.
            default: Text used when the key does not name a string.
            **kwargs: Values for the template's `{name}` fields.

        Returns:
            str: The formatted message, the default, or the key itself.
        """
        template = self._lookup(key) or default or key
        if not kwargs:
            return template
        try:
            return template.format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"I18n: Interpolation error for '{key}': {e}")
            return template

    def _lookup(self, key: str) -> Optional[str]:
        node: Any = self._translations
        for part in key.split("."):
            if not isinstance(node, dict):
                return None
            node = node.get(part)
        return node if isinstance(node, str) else None


i18n = I18n(DEFAULT_LOCALE)
