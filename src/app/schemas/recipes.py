# src/app/schemas/recipes.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

from src.app.domain.models import RecipeSubmission, SubmissionResult
from src.services.types import LocalizedView, RecipeDraft

LanguageCode = Literal["en", "am"]


class RecipeSubmitRequest(BaseModel):
    language: LanguageCode = Field(..., description="Language the author typed in")
    title: str = ""
    description: str = ""
    category: str = ""
    ingredients: str = Field(default="", description="One ingredient per line")
    steps: str = Field(default="", description="One step per line")
    imageBase64: Optional[str] = None
    videoURL: str = ""

    def to_submission(self) -> RecipeSubmission:
        return RecipeSubmission(
            draft=RecipeDraft(
                source_language=self.language,
                title=self.title,
                description=self.description,
                category=self.category,
                ingredients=self.ingredients,
                steps=self.steps,
            ),
            image_base64=self.imageBase64,
            video_url=self.videoURL,
        )


class RecipeSubmitResponse(BaseModel):
    id: str
    autoTranslated: bool
    translationError: bool
    message: str
    fieldStatus: dict[str, str] = Field(default_factory=dict)
    strategies: dict[str, Optional[str]] = Field(default_factory=dict)

    @classmethod
    def from_result(cls, result: SubmissionResult) -> "RecipeSubmitResponse":
        return cls(
            id=result.recipe_id,
            autoTranslated=result.auto_translated,
            translationError=result.translation_error,
            message=result.message,
            fieldStatus={name: status.value for name, status in result.report.fields.items()},
            strategies=dict(result.report.strategies),
        )


class LocalizedRecipeResponse(BaseModel):
    id: Optional[str] = None
    language: LanguageCode
    title: str
    description: str
    category: str
    ingredients: str
    steps: str
    originalLanguage: Optional[str] = None
    approved: bool = False
    autoTranslated: bool = False
    translationError: bool = False
    authorName: Optional[str] = None
    videoURL: Optional[str] = None
    hasImage: bool = False
    createdAt: Optional[str] = None

    @classmethod
    def from_view(cls, view: LocalizedView) -> "LocalizedRecipeResponse":
        return cls(
            id=view.id,
            language=view.language,
            title=view.title,
            description=view.description,
            category=view.category,
            ingredients=view.ingredients,
            steps=view.steps,
            originalLanguage=view.original_language,
            approved=view.approved,
            autoTranslated=view.auto_translated,
            translationError=view.translation_error,
            authorName=view.author_name,
            videoURL=view.video_url,
            hasImage=view.has_image,
            createdAt=view.created_at,
        )


class ApprovalResponse(BaseModel):
    id: str
    approved: bool = True
    reviewedAt: str


class CategoryResponse(BaseModel):
    en: str
    am: str
    name: str
