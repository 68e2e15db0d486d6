# src/app/services/submission_service.py
"""
Recipe submission service.
Validates a single-language draft, fills the sibling language and persists
the bilingual document exactly once.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable

from starlette.concurrency import run_in_threadpool

from src.app.domain.errors import InvalidDraftError
from src.app.domain.models import Author, Recipe, RecipeSubmission, SubmissionResult
from src.app.infra.db.base import RecipeRepository
from src.services.i18n import LanguageContext
from src.services.translation import TranslationPipeline
from src.services.types import LOCALIZABLE_FIELDS, SUPPORTED_LANGUAGES, RecipeDraft, TranslatedDraft

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "category", "ingredients", "steps")


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


def validate_draft(draft: RecipeDraft) -> RecipeDraft:
    """
    Trim every localizable value and check required fields.

    Raises:
        InvalidDraftError: If the language is unsupported or a required field is blank
    """
    if draft.source_language not in SUPPORTED_LANGUAGES:
        raise InvalidDraftError(
            ["source_language"],
            f"Unsupported source language: {draft.source_language!r}",
        )

    trimmed = replace(draft, **{
        name: (getattr(draft, name) or "").strip()
        for name in LOCALIZABLE_FIELDS
    })

    missing = [name for name in REQUIRED_FIELDS if not getattr(trimmed, name)]
    if missing:
        raise InvalidDraftError(missing)
    return trimmed


def _confirmation_message(translated: TranslatedDraft) -> str:
    context = LanguageContext(translated.source_language)
    key = "submission.translationSuccess" if translated.auto_translated else "submission.translationPartial"
    return context.t(key, language=context.language_name(context.sibling))


class RecipeSubmissionService:
    def __init__(
        self,
        repository: RecipeRepository,
        pipeline: TranslationPipeline,
        clock: Callable[[], datetime] = _now_utc,
    ):
        self._repo = repository
        self._pipeline = pipeline
        self._clock = clock

    def build_recipe(
        self,
        submission: RecipeSubmission,
        translated: TranslatedDraft,
        author: Author,
    ) -> Recipe:
        fields = translated.fields
        return Recipe(
            title=fields["title"],
            description=fields["description"],
            category=fields["category"],
            ingredients=fields["ingredients"],
            steps=fields["steps"],
            original_language=translated.source_language,
            author_id=author.id,
            author_name=author.display_name,
            author_email=author.email,
            image_base64=submission.image_base64,
            video_url=(submission.video_url or "").strip(),
            approved=False,
            auto_translated=translated.auto_translated,
            translation_error=translated.translation_error,
            created_at=self._clock(),
        )

    async def submit(self, submission: RecipeSubmission, author: Author) -> SubmissionResult:
        """
        Translate and persist a submission.

        Raises:
            InvalidDraftError: Before any translation, for an incomplete draft
            PersistenceError: If the store rejects the write; nothing was saved
        """
        draft = validate_draft(submission.draft)
        translated = await self._pipeline.translate_draft(draft)
        recipe = self.build_recipe(submission, translated, author)

        recipe_id = await run_in_threadpool(self._repo.create, recipe.to_document())
        recipe.id = recipe_id

        logger.info(
            "Recipe submitted: id=%s, author=%s, auto_translated=%s, translation_error=%s",
            recipe_id,
            author.id,
            recipe.auto_translated,
            recipe.translation_error,
        )
        return SubmissionResult(
            recipe_id=recipe_id,
            recipe=recipe,
            report=translated.report,
            message=_confirmation_message(translated),
        )
