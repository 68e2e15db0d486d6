# src/app/routers/moderation.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from src.app.deps import (
    CurrentUser,
    get_catalog_service,
    get_current_user,
    get_language_context,
    get_moderation_service,
)
from src.app.domain.errors import PersistenceError, RecipeNotFoundError
from src.app.schemas.recipes import ApprovalResponse, LocalizedRecipeResponse
from src.app.services.recipe_service import ModerationService, RecipeCatalogService
from src.services.i18n import LanguageContext

router = APIRouter(prefix="/moderation/recipes", tags=["moderation"])


@router.get("", response_model=list[LocalizedRecipeResponse])
def list_pending(
    user: CurrentUser = Depends(get_current_user),
    context: LanguageContext = Depends(get_language_context),
    service: RecipeCatalogService = Depends(get_catalog_service),
) -> list[LocalizedRecipeResponse]:
    try:
        views = service.list_pending(context)
    except PersistenceError as error:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(error)) from error
    return [LocalizedRecipeResponse.from_view(view) for view in views]


@router.post("/{recipe_id}/approve", response_model=ApprovalResponse)
def approve_recipe(
    recipe_id: str,
    user: CurrentUser = Depends(get_current_user),
    service: ModerationService = Depends(get_moderation_service),
) -> ApprovalResponse:
    try:
        reviewed_at = service.approve(recipe_id)
    except RecipeNotFoundError as error:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found") from error
    except PersistenceError as error:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(error)) from error
    return ApprovalResponse(id=recipe_id, reviewedAt=reviewed_at.isoformat())


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
def reject_recipe(
    recipe_id: str,
    user: CurrentUser = Depends(get_current_user),
    service: ModerationService = Depends(get_moderation_service),
) -> Response:
    try:
        service.reject(recipe_id)
    except RecipeNotFoundError as error:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found") from error
    except PersistenceError as error:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(error)) from error
    return Response(status_code=status.HTTP_204_NO_CONTENT)
