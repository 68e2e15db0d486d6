# src/app/domain/models.py
"""
Domain models for recipe submission and moderation.
These are pure data structures with no infrastructure dependencies.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from src.services.types import RecipeDraft, TranslationReport


@dataclass
class Author:
    id: str
    email: Optional[str] = None
    name: Optional[str] = None

    @property
    def display_name(self) -> str:
        """Profile name, else the local part of the e-mail address."""
        if self.name and self.name.strip():
            return self.name.strip()
        if self.email:
            return self.email.split("@")[0]
        return self.id


@dataclass
class RecipeSubmission:
    """What an author sends: the single-language draft plus media."""
    draft: RecipeDraft
    image_base64: Optional[str] = None
    video_url: str = ""


@dataclass
class Recipe:
    """
    A bilingual recipe document as written to the store.
    Localizable fields map language code -> text.
    """
    title: dict[str, str]
    description: dict[str, str]
    category: dict[str, str]
    ingredients: dict[str, str]
    steps: dict[str, str]
    original_language: str
    author_id: str
    author_name: str
    author_email: Optional[str] = None

    image_base64: Optional[str] = None
    video_url: str = ""

    approved: bool = False
    auto_translated: bool = False
    translation_error: bool = False

    created_at: Optional[datetime] = None
    reviewed_at: Optional[datetime] = None
    id: Optional[str] = None

    @property
    def has_image(self) -> bool:
        return bool(self.image_base64)

    def to_document(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "ingredients": self.ingredients,
            "steps": self.steps,
            "image_base64": self.image_base64,
            "has_image": self.has_image,
            "video_url": self.video_url,
            "author_id": self.author_id,
            "author_email": self.author_email,
            "author_name": self.author_name,
            "approved": self.approved,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "reviewed_at": self.reviewed_at.isoformat() if self.reviewed_at else None,
            "original_language": self.original_language,
            "auto_translated": self.auto_translated,
            "translation_error": self.translation_error,
        }


@dataclass
class SubmissionResult:
    recipe_id: str
    recipe: Recipe
    report: TranslationReport = field(default_factory=TranslationReport)
    message: str = ""

    @property
    def auto_translated(self) -> bool:
        return self.recipe.auto_translated

    @property
    def translation_error(self) -> bool:
        return self.recipe.translation_error
