# src/app/services/recipe_service.py
"""
Read paths and moderation over the recipe store.
Every record leaving this module is projected into the viewer's language.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from src.app.infra.db.base import RecipeRepository
from src.services.i18n import LanguageContext, list_placeholders
from src.services.localize import localize_recipe, localize_recipes, search_recipes
from src.services.types import LocalizedView

logger = logging.getLogger(__name__)

DEFAULT_LIST_LIMIT = 100


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


class RecipeCatalogService:
    def __init__(self, repository: RecipeRepository, limit: int = DEFAULT_LIST_LIMIT):
        self._repo = repository
        self.limit = limit

    def _localize_list(self, records: list[dict], context: LanguageContext) -> list[LocalizedView]:
        placeholders = list_placeholders(context)
        return localize_recipes(
            records,
            context.locale,
            title_default=placeholders.title,
            category_default=placeholders.category,
        )

    def list_approved(
        self,
        context: LanguageContext,
        query: Optional[str] = None,
        category: Optional[str] = None,
    ) -> list[LocalizedView]:
        records = self._repo.list_recipes(approved=True, limit=self.limit)
        views = self._localize_list(records, context)
        return search_recipes(views, query=query, category=category)

    def list_pending(self, context: LanguageContext) -> list[LocalizedView]:
        records = self._repo.list_recipes(approved=False, limit=self.limit)
        return self._localize_list(records, context)

    def get_recipe(self, recipe_id: str, context: LanguageContext) -> LocalizedView:
        return localize_recipe(self._repo.get(recipe_id), context.locale)


class ModerationService:
    def __init__(
        self,
        repository: RecipeRepository,
        clock: Callable[[], datetime] = _now_utc,
    ):
        self._repo = repository
        self._clock = clock

    def approve(self, recipe_id: str) -> datetime:
        reviewed_at = self._clock()
        self._repo.approve(recipe_id, reviewed_at)
        logger.info("Recipe %s approved at %s", recipe_id, reviewed_at.isoformat())
        return reviewed_at

    def reject(self, recipe_id: str) -> None:
        self._repo.delete(recipe_id)
        logger.info("Recipe %s rejected", recipe_id)
