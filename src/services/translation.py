"""
Bilingual translation pipeline for newly authored recipes.

Every field is translated independently through an ordered chain of
strategies; the first validated result wins. Failures degrade to the source
text and are reported, they are never raised to the caller.
"""
from __future__ import annotations

import asyncio
import logging
import re
from typing import Awaitable, Sequence

from .categories import CATEGORIES, Category, find_category
from .errors import ServiceError
from .translators import TranslationStrategy, validate_translation
from .types import (
    FieldStatus,
    LanguagePair,
    RecipeDraft,
    TextTranslation,
    TranslatedDraft,
    TranslationReport,
)

logger = logging.getLogger(__name__)

ORDINAL_PATTERN = re.compile(r"^\s*\d+[.)]\s*")
CATEGORY_STRATEGY = "category"


def strip_ordinal(line: str) -> str:
    return ORDINAL_PATTERN.sub("", line, count=1).strip()


def number_lines(lines: Sequence[str]) -> list[str]:
    return [f"{index}. {line}" for index, line in enumerate(lines, start=1)]


def split_lines(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def is_multiline(text: str) -> bool:
    return "\n" in text or "\r" in text


def _aggregate(parts: Sequence[TextTranslation], text: str) -> TextTranslation:
    statuses = {part.status for part in parts}
    if FieldStatus.FALLBACK in statuses:
        status = FieldStatus.FALLBACK
    elif statuses == {FieldStatus.SKIPPED} or not statuses:
        status = FieldStatus.SKIPPED
    else:
        status = FieldStatus.TRANSLATED

    names = sorted({part.strategy for part in parts if part.strategy})
    return TextTranslation(text=text, status=status, strategy="+".join(names) or None)


class TranslationPipeline:
    def __init__(
        self,
        strategies: Sequence[TranslationStrategy],
        categories: tuple[Category, ...] = CATEGORIES,
    ) -> None:
        self._strategies = tuple(strategies)
        self._categories = categories

    @property
    def strategy_names(self) -> list[str]:
        return [strategy.name for strategy in self._strategies]

    async def translate_text(self, text: str, pair: LanguagePair) -> TextTranslation:
        source = text.strip()
        if not source:
            return TextTranslation(text=text, status=FieldStatus.SKIPPED)

        for strategy in self._strategies:
            try:
                candidate = await strategy.attempt(source, pair)
                translated = validate_translation(source, candidate)
            except ServiceError as error:
                logger.debug("Strategy %s failed (%s): %s", strategy.name, pair.code, error)
                continue
            except Exception:
                logger.warning("Strategy %s raised unexpectedly (%s)", strategy.name, pair.code, exc_info=True)
                continue
            logger.debug("Strategy %s translated %d chars (%s)", strategy.name, len(source), pair.code)
            return TextTranslation(text=translated, status=FieldStatus.TRANSLATED, strategy=strategy.name)

        logger.warning("No translation for %r (%s), keeping source text", source[:50], pair.code)
        return TextTranslation(text=source, status=FieldStatus.FALLBACK)

    async def translate_category(self, text: str, pair: LanguagePair) -> TextTranslation:
        match = find_category(text, self._categories)
        if match:
            return TextTranslation(
                text=match.name(pair.target),
                status=FieldStatus.TRANSLATED,
                strategy=CATEGORY_STRATEGY,
            )
        return await self.translate_text(text, pair)

    async def translate_multiline(self, text: str, pair: LanguagePair) -> TextTranslation:
        if not is_multiline(text):
            return await self.translate_text(text, pair)

        lines = split_lines(text)
        if not lines:
            return await self.translate_text(text, pair)
        parts = await asyncio.gather(*(self.translate_text(line, pair) for line in lines))
        return _aggregate(parts, "\n".join(part.text for part in parts))

    async def translate_steps(self, text: str, pair: LanguagePair) -> TextTranslation:
        if not is_multiline(text):
            return await self.translate_text(text, pair)

        bodies = [strip_ordinal(line) for line in split_lines(text)]
        if not bodies:
            return await self.translate_text(text, pair)
        parts = await asyncio.gather(*(self.translate_text(body, pair) for body in bodies))
        numbered = number_lines([part.text for part in parts])
        return _aggregate(parts, "\n".join(numbered))

    def _field_jobs(self, draft: RecipeDraft, pair: LanguagePair) -> dict[str, Awaitable[TextTranslation]]:
        return {
            "title": self.translate_text(draft.title, pair),
            "description": self.translate_text(draft.description, pair),
            "ingredients": self.translate_multiline(draft.ingredients, pair),
            "steps": self.translate_steps(draft.steps, pair),
            "category": self.translate_category(draft.category, pair),
        }

    async def translate_draft(self, draft: RecipeDraft) -> TranslatedDraft:
        pair = LanguagePair.from_source(draft.source_language)
        sources = draft.localizable_values()
        jobs = self._field_jobs(draft, pair)

        logger.info("Starting recipe translation %s -> %s", pair.source, pair.target)
        results = await asyncio.gather(*jobs.values(), return_exceptions=True)

        report = TranslationReport()
        fields: dict[str, dict[str, str]] = {}
        crashed = False

        for name, result in zip(jobs.keys(), results):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                logger.error("Translation of %s failed unexpectedly", name, exc_info=result)
                crashed = True
                result = TextTranslation(text=sources[name], status=FieldStatus.FALLBACK)

            fields[name] = {pair.source: sources[name], pair.target: result.text}
            report.fields[name] = result.status
            report.strategies[name] = result.strategy

        auto_translated = not crashed
        translation_error = crashed or report.degraded

        logger.info(
            "Recipe translation finished: auto_translated=%s translation_error=%s %s",
            auto_translated,
            translation_error,
            report.summary(),
        )
        return TranslatedDraft(
            source_language=pair.source,
            fields=fields,
            report=report,
            auto_translated=auto_translated,
            translation_error=translation_error,
        )

