from __future__ import annotations

import asyncio
from datetime import datetime, timezone

import pytest

from src.app.domain.errors import InvalidDraftError, PersistenceError
from src.app.domain.models import Author, RecipeSubmission
from src.app.services.submission_service import RecipeSubmissionService, validate_draft
from src.services.errors import TranslationServiceError
from src.services.translation import TranslationPipeline
from src.services.translators import DictionaryStrategy, TranslationStrategy
from src.services.types import LanguagePair, RecipeDraft

FIXED_NOW = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


class TableStrategy(TranslationStrategy):
    name = "table"

    def __init__(self, table: dict[str, str]) -> None:
        self.table = table
        self.calls = 0

    async def attempt(self, text: str, pair: LanguagePair) -> str:
        self.calls += 1
        if text not in self.table:
            raise TranslationServiceError(f"no entry for {text!r}")
        return self.table[text]


def make_draft(**overrides: str) -> RecipeDraft:
    values = {
        "source_language": "en",
        "title": "Shiro",
        "description": "Chickpea stew",
        "category": "Vegetarian",
        "ingredients": "chickpea flour\nwater",
        "steps": "Boil water\nWhisk in flour",
    }
    values.update(overrides)
    return RecipeDraft(**values)  # type: ignore[arg-type]


FULL_TABLE = {
    "Shiro": "ሽሮ",
    "Chickpea stew": "የሽምብራ ወጥ",
    "chickpea flour": "የሽምብራ ዱቄት",
    "water": "ውሃ",
    "Boil water": "ውሃ አፍላ",
    "Whisk in flour": "ዱቄቱን ጨምር",
}

AUTHOR = Author(id="user-1", email="almaz@example.com")


def make_service(repository, strategies) -> RecipeSubmissionService:
    return RecipeSubmissionService(
        repository,
        TranslationPipeline(strategies),
        clock=lambda: FIXED_NOW,
    )


class TestValidateDraft:
    def test_trims_values(self) -> None:
        draft = validate_draft(make_draft(title="  Shiro  ", description=" \n"))
        assert draft.title == "Shiro"
        assert draft.description == ""

    def test_reports_every_missing_required_field(self) -> None:
        with pytest.raises(InvalidDraftError) as exc:
            validate_draft(make_draft(title=" ", steps=""))
        assert exc.value.missing_fields == ["title", "steps"]

    def test_description_is_optional(self) -> None:
        assert validate_draft(make_draft(description="")).description == ""

    def test_rejects_unsupported_language(self) -> None:
        with pytest.raises(InvalidDraftError) as exc:
            validate_draft(make_draft(source_language="fr"))
        assert exc.value.missing_fields == ["source_language"]


class TestSubmit:
    def test_persists_bilingual_document_once(self, recipe_repository) -> None:
        strategy = TableStrategy(FULL_TABLE)
        service = make_service(recipe_repository, [strategy])
        submission = RecipeSubmission(
            draft=make_draft(),
            image_base64="aGVsbG8=",
            video_url=" https://youtu.be/abc ",
        )

        result = asyncio.run(service.submit(submission, AUTHOR))

        assert recipe_repository.create_calls == 1
        stored = recipe_repository.records[result.recipe_id]
        assert stored["title"] == {"en": "Shiro", "am": "ሽሮ"}
        assert stored["category"] == {"en": "Vegetarian", "am": "አትክልት ምግብ"}
        assert stored["steps"]["am"] == "1. ውሃ አፍላ\n2. ዱቄቱን ጨምር"
        assert stored["original_language"] == "en"
        assert stored["approved"] is False
        assert stored["auto_translated"] is True
        assert stored["translation_error"] is False
        assert stored["author_name"] == "almaz"
        assert stored["has_image"] is True
        assert stored["video_url"] == "https://youtu.be/abc"
        assert stored["created_at"] == FIXED_NOW.isoformat()

        assert result.auto_translated is True
        assert result.translation_error is False
        assert result.message == "Your recipe was submitted and translated to Amharic."

    def test_partial_translation_still_submits(self, recipe_repository) -> None:
        service = make_service(recipe_repository, [TableStrategy({"Shiro": "ሽሮ"})])

        result = asyncio.run(service.submit(RecipeSubmission(draft=make_draft()), AUTHOR))

        stored = recipe_repository.records[result.recipe_id]
        assert stored["ingredients"] == {
            "en": "chickpea flour\nwater",
            "am": "chickpea flour\nwater",
        }
        assert stored["translation_error"] is True
        assert stored["auto_translated"] is True

    def test_amharic_author_gets_amharic_message(self, recipe_repository) -> None:
        draft = make_draft(
            source_language="am",
            title="ጨው",
            description="",
            category="ሾርባ",
            ingredients="ጨው\nውሃ",
            steps="ውሃ",
        )
        service = make_service(recipe_repository, [DictionaryStrategy()])

        result = asyncio.run(service.submit(RecipeSubmission(draft=draft), AUTHOR))

        stored = recipe_repository.records[result.recipe_id]
        assert stored["title"] == {"am": "ጨው", "en": "salt"}
        assert stored["category"]["en"] == "Soup"
        assert "እንግሊዝኛ" in result.message

    def test_invalid_draft_translates_nothing(self, recipe_repository) -> None:
        strategy = TableStrategy(FULL_TABLE)
        service = make_service(recipe_repository, [strategy])

        with pytest.raises(InvalidDraftError):
            asyncio.run(service.submit(RecipeSubmission(draft=make_draft(category="")), AUTHOR))

        assert strategy.calls == 0
        assert recipe_repository.create_calls == 0

    def test_store_failure_propagates(self, recipe_repository) -> None:
        recipe_repository.fail_with = PersistenceError("create", "connection refused")
        service = make_service(recipe_repository, [TableStrategy(FULL_TABLE)])

        with pytest.raises(PersistenceError):
            asyncio.run(service.submit(RecipeSubmission(draft=make_draft()), AUTHOR))

        assert recipe_repository.records == {}
