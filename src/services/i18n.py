from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from .types import Language, SUPPORTED_LANGUAGES, sibling_language

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE: Language = "en"

MESSAGES: Mapping[str, Mapping[str, str]] = {
    "en": {
        "recipe.untitled": "Untitled",
        "recipe.unknownCategory": "Unknown",
        "languages.en": "English",
        "languages.am": "Amharic",
        "submission.translationSuccess": "Your recipe was submitted and translated to {language}.",
        "submission.translationPartial": (
            "Your recipe was submitted. Translation to {language} was only partially successful."
        ),
    },
    "am": {
        "recipe.untitled": "ርዕስ የሌለው",
        "recipe.unknownCategory": "ያልታወቀ",
        "languages.en": "እንግሊዝኛ",
        "languages.am": "አማርኛ",
        "submission.translationSuccess": "የምግብ አዘገጃጀትዎ ተልኳል እና ወደ {language} ተተርጉሟል።",
        "submission.translationPartial": "የምግብ አዘገጃጀትዎ ተልኳል። ወደ {language} የተደረገው ትርጉም በከፊል ብቻ ተሳክቷል።",
    },
}


def resolve_language(value: object, default: Language = DEFAULT_LANGUAGE) -> Language:
    """Accepts "en", "am" or a locale tag such as "am-ET"; anything else gives the default."""
    if not isinstance(value, str):
        return default
    primary = value.strip().replace("_", "-").split("-")[0].lower()
    if primary in SUPPORTED_LANGUAGES:
        return primary  # type: ignore[return-value]
    return default


@dataclass(frozen=True)
class LanguageContext:
    locale: Language = DEFAULT_LANGUAGE

    @property
    def sibling(self) -> Language:
        return sibling_language(self.locale)

    def t(self, key: str, **params: object) -> str:
        template = MESSAGES.get(self.locale, {}).get(key) or MESSAGES[DEFAULT_LANGUAGE].get(key)
        if template is None:
            logger.debug("Missing message key: %s", key)
            return key
        if not params:
            return template
        try:
            return template.format(**params)
        except (KeyError, IndexError):
            logger.warning("Could not format message %s with %s", key, sorted(params))
            return template

    def language_name(self, language: Language) -> str:
        return self.t(f"languages.{language}")


@dataclass(frozen=True)
class ListPlaceholders:
    title: str
    category: str


def list_placeholders(context: LanguageContext) -> ListPlaceholders:
    return ListPlaceholders(
        title=context.t("recipe.untitled"),
        category=context.t("recipe.unknownCategory"),
    )
