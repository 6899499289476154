"""
JSON catalog translator.

Catalogs are nested JSON objects addressed by dotted keys, e.g.
``errors.user.not_found``. Placeholders use ``{name}``; placeholders
without a value are left untouched so a missing param never breaks the
response.
"""

import json
import logging
from pathlib import Path
from typing import Any, Mapping

logger = logging.getLogger(__name__)


class _KeepMissing(dict):
    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


class Translator:
    """Resolves translation keys against per-locale JSON catalogs.

    Args:
        lang_path: Directory containing ``<locale>.json`` files.
        default_locale: Locale used when none is requested.
        fallback_locale: Locale consulted when a key is missing.
    """

    def __init__(
        self,
        lang_path: Path,
        default_locale: str = "en",
        fallback_locale: str = "en",
    ) -> None:
        self._lang_path = Path(lang_path)
        self.default_locale = default_locale
        self.fallback_locale = fallback_locale
        self._catalogs: dict[str, dict[str, Any]] = {}

    @property
    def locales(self) -> list[str]:
        """Locales with a catalog on disk."""
        return sorted(p.stem for p in self._lang_path.glob("*.json"))

    def translate(
        self,
        key: str,
        params: Mapping[str, Any] | None = None,
        locale: str | None = None,
    ) -> str:
        """Translate ``key``; returns the key itself when no catalog has it."""
        for candidate in (locale or self.default_locale, self.fallback_locale):
            text = self._lookup(candidate, key)
            if text is not None:
                return text.format_map(_KeepMissing(params or {}))

        logger.warning("Missing translation for key %s", key)
        return key

    def negotiate(self, accept_language: str | None) -> str:
        """Pick the first supported locale from an Accept-Language header."""
        if not accept_language:
            return self.default_locale

        supported = set(self.locales)
        for part in accept_language.split(","):
            tag = part.split(";", 1)[0].strip().lower()
            if not tag or tag == "*":
                continue
            if tag in supported:
                return tag
            primary = tag.split("-", 1)[0]
            if primary in supported:
                return primary
        return self.default_locale

    def _lookup(self, locale: str, key: str) -> str | None:
        node: Any = self._catalog(locale)
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node if isinstance(node, str) else None

    def _catalog(self, locale: str) -> dict[str, Any]:
        if locale not in self._catalogs:
            path = self._lang_path / f"{locale}.json"
            if path.is_file():
                with path.open(encoding="utf-8") as handle:
                    self._catalogs[locale] = json.load(handle)
            else:
                self._catalogs[locale] = {}
        return self._catalogs[locale]
