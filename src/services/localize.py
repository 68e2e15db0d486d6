"""
Projection of stored recipes (legacy or bilingual) into a single language.

Records come from a shared store that may hold documents written by older
clients, so nothing here raises: unexpected shapes degrade to defaults.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Iterable, Mapping, Optional, Sequence

from .categories import CATEGORIES
from .errors import MalformedRecordShape
from .types import (
    FALLBACK_ORDER,
    LanguageMap,
    Language,
    LocalizedText,
    LocalizedView,
    PlainText,
    parse_localized_text,
)

logger = logging.getLogger(__name__)

VEGETARIAN_FILTER = "vegetarian"


def _project(value: Optional[LocalizedText], language: str, default: str) -> str:
    if value is None:
        return default
    if isinstance(value, PlainText):
        return value.value
    if isinstance(value, LanguageMap):
        for candidate in (language, *FALLBACK_ORDER):
            text = value.get(candidate)
            if text and text.strip():
                return text
        return default
    return default


def localize_field(recipe: object, field_name: str, language: str, default: str = "") -> str:
    if not isinstance(recipe, Mapping):
        return default
    try:
        value = parse_localized_text(field_name, recipe.get(field_name))
    except MalformedRecordShape as error:
        logger.debug("Using default for %s: %s", field_name, error)
        return default
    return _project(value, language, default)


def _first(recipe: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in recipe and recipe[key] is not None:
            return recipe[key]
    return None


def _optional_str(value: object) -> Optional[str]:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        text = str(value).strip()
        return text or None
    return None


def localize_recipe(
    recipe: object,
    language: Language,
    *,
    title_default: str = "",
    category_default: str = "",
) -> LocalizedView:
    record: Mapping[str, Any] = recipe if isinstance(recipe, Mapping) else {}

    return LocalizedView(
        id=_optional_str(record.get("id")),
        language=language,
        title=localize_field(record, "title", language, title_default),
        description=localize_field(record, "description", language),
        category=localize_field(record, "category", language, category_default),
        ingredients=localize_field(record, "ingredients", language),
        steps=localize_field(record, "steps", language),
        original_language=_optional_str(_first(record, "original_language", "originalLanguage")),
        approved=_first(record, "approved") is True,
        auto_translated=_first(record, "auto_translated", "autoTranslated") is True,
        translation_error=_first(record, "translation_error", "translationError") is True,
        author_name=_optional_str(_first(record, "author_name", "authorName")),
        video_url=_optional_str(_first(record, "video_url", "videoURL")),
        has_image=_first(record, "has_image", "hasImage") is True,
        created_at=_optional_str(_first(record, "created_at", "createdAt")),
    )


def localize_recipes(
    recipes: Iterable[object],
    language: Language,
    *,
    title_default: str = "",
    category_default: str = "",
) -> list[LocalizedView]:
    return [
        localize_recipe(
            recipe,
            language,
            title_default=title_default,
            category_default=category_default,
        )
        for recipe in recipes
    ]


def _category_matches(view: LocalizedView, wanted: str) -> bool:
    category = view.category.casefold()
    if wanted == VEGETARIAN_FILTER:
        vegetarian_names = {
            c.name(lang).casefold() for c in CATEGORIES if c.en.casefold() == VEGETARIAN_FILTER
            for lang in ("en", "am")
        }
        return VEGETARIAN_FILTER in category or category in vegetarian_names
    return category == wanted


def _query_matches(view: LocalizedView, query: str) -> bool:
    haystacks = (view.title, view.description, view.category, view.ingredients)
    return any(query in text.casefold() for text in haystacks)


def search_recipes(
    views: Sequence[LocalizedView],
    query: Optional[str] = None,
    category: Optional[str] = None,
) -> list[LocalizedView]:
    needle = (query or "").strip().casefold()
    wanted = (category or "").strip().casefold()

    results = list(views)
    if needle:
        results = [view for view in results if _query_matches(view, needle)]
    if wanted:
        results = [view for view in results if _category_matches(view, wanted)]
    return results
