"""
Interface string tables.

One flat JSON table per language lives in ``linguacontent/locales``
(``en.json``, ``ar.json`` ...). Keys use dot notation (``nav.home``) and
values may contain ``{{name}}`` placeholders.

Example:

    from linguacontent.i18n.service import i18n

    i18n.t("nav.home", language="fr")            # "Accueil"
    i18n.t("error.minLength", "en", length=8)     # "Must be at least 8 characters"
"""

import json
import re
from pathlib import Path
from typing import Dict, List, Optional, Any

from linguacontent.logging_config import setup_logger
logger = setup_logger(__name__, "content.log")


LOCALES_DIR = Path(__file__).resolve().parent.parent / "locales"
RTL_LANGUAGES = {"ar"}

_PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")


class I18nService:
    """
    Loads every table once and answers lookups with fallback to the
    default language, then to the key itself.
    """

    def __init__(self, locales_dir: Path = LOCALES_DIR, default_language: str = "en"):
        self.locales_dir = Path(locales_dir)
        self.default_language = default_language
        self.translations: Dict[str, Dict[str, str]] = {}
        self._load_translations()

    def _load_translations(self) -> None:
        if not self.locales_dir.exists():
            logger.warning(f"Locales directory {self.locales_dir} not found")
            return

        for file_path in sorted(self.locales_dir.glob("*.json")):
            try:
                with open(file_path, "r", encoding="utf-8") as f:
                    self.translations[file_path.stem] = json.load(f)
            except (json.JSONDecodeError, IOError) as e:
                logger.error(f"Failed to load {file_path}: {e}")

    @property
    def supported_languages(self) -> List[str]:
        return list(self.translations.keys())

    def is_supported(self, language: Optional[str]) -> bool:
        return bool(language) and language.lower() in self.translations

    @staticmethod
    def is_rtl(language: str) -> bool:
        return language.lower() in RTL_LANGUAGES

    @staticmethod
    def _interpolate(text: str, variables: Dict[str, Any]) -> str:
        if not variables:
            return text
        return _PLACEHOLDER.sub(
            lambda match: str(variables[match.group(1)]) if match.group(1) in variables else match.group(0),
            text,
        )

    def t(self, key: str, language: Optional[str] = None, **variables: Any) -> str:
        language = (language or self.default_language).lower()

        text = self.translations.get(language, {}).get(key)
        if text is None:
            text = self.translations.get(self.default_language, {}).get(key)
        if text is None:
            return key

        return self._interpolate(text, variables)

    def get_strings(self, language: str) -> Dict[str, str]:
        """Full table for a language, default-language entries filling the gaps."""
        merged = dict(self.translations.get(self.default_language, {}))
        merged.update(self.translations.get(language.lower(), {}))
        return merged


i18n = I18nService()
