# src/app/routers/recipes.py
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.app.deps import (
    CurrentUser,
    get_catalog_service,
    get_current_user,
    get_language_context,
    get_submission_service,
)
from src.app.domain.errors import InvalidDraftError, PersistenceError, RecipeNotFoundError
from src.app.schemas.recipes import (
    CategoryResponse,
    LocalizedRecipeResponse,
    RecipeSubmitRequest,
    RecipeSubmitResponse,
)
from src.app.services.recipe_service import RecipeCatalogService
from src.app.services.submission_service import RecipeSubmissionService
from src.services.categories import CATEGORIES
from src.services.i18n import LanguageContext

log = logging.getLogger("recipes")
router = APIRouter(tags=["recipes"])


@router.post("/recipes", response_model=RecipeSubmitResponse, status_code=status.HTTP_201_CREATED)
async def submit_recipe(
    payload: RecipeSubmitRequest,
    user: CurrentUser = Depends(get_current_user),
    service: RecipeSubmissionService = Depends(get_submission_service),
) -> RecipeSubmitResponse:
    try:
        result = await service.submit(payload.to_submission(), user.to_author())
    except InvalidDraftError as error:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": str(error), "missingFields": error.missing_fields},
        ) from error
    except PersistenceError as error:
        log.error("Recipe from %s was not saved: %s", user.id, error)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Recipe could not be saved. Please try again.",
        ) from error

    return RecipeSubmitResponse.from_result(result)


@router.get("/recipes", response_model=list[LocalizedRecipeResponse])
def list_recipes(
    q: Optional[str] = Query(default=None, description="Search text"),
    category: Optional[str] = Query(default=None, description="Localized category name"),
    context: LanguageContext = Depends(get_language_context),
    service: RecipeCatalogService = Depends(get_catalog_service),
) -> list[LocalizedRecipeResponse]:
    try:
        views = service.list_approved(context, query=q, category=category)
    except PersistenceError as error:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(error)) from error
    return [LocalizedRecipeResponse.from_view(view) for view in views]


@router.get("/recipes/{recipe_id}", response_model=LocalizedRecipeResponse)
def get_recipe(
    recipe_id: str,
    context: LanguageContext = Depends(get_language_context),
    service: RecipeCatalogService = Depends(get_catalog_service),
) -> LocalizedRecipeResponse:
    try:
        view = service.get_recipe(recipe_id, context)
    except RecipeNotFoundError as error:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found") from error
    except PersistenceError as error:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(error)) from error
    return LocalizedRecipeResponse.from_view(view)


@router.get("/categories", response_model=list[CategoryResponse])
def list_categories(
    context: LanguageContext = Depends(get_language_context),
) -> list[CategoryResponse]:
    return [
        CategoryResponse(en=category.en, am=category.am, name=category.name(context.locale))
        for category in CATEGORIES
    ]
