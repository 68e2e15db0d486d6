# src/app/deps.py (singletons exposed as FastAPI dependencies)

from __future__ import annotations

from typing import Optional

import httpx
from fastapi import Depends, Header, HTTPException, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel
from supabase import Client, create_client

from src.app.config import settings
from src.app.domain.models import Author
from src.app.infra.db.base import RecipeRepository
from src.app.infra.db.supabase_recipes_repo import SupabaseRecipeRepository
from src.app.services.recipe_service import ModerationService, RecipeCatalogService
from src.app.services.submission_service import RecipeSubmissionService
from src.services.i18n import LanguageContext, resolve_language
from src.services.translation import TranslationPipeline
from src.services.translators import default_strategies

_client: Client | None = None
_http_client: httpx.AsyncClient | None = None


def get_supabase() -> Client:
    global _client
    if _client is None:
        _client = create_client(str(settings.SUPABASE_URL),
                                settings.SUPABASE_SERVICE_ROLE_KEY)
    return _client


def get_http_client() -> httpx.AsyncClient:
    global _http_client
    if _http_client is None or _http_client.is_closed:
        _http_client = httpx.AsyncClient(
            timeout=settings.TRANSLATION_TIMEOUT_SECONDS,
            follow_redirects=True,
        )
    return _http_client


async def close_http_client() -> None:
    global _http_client
    if _http_client is not None:
        await _http_client.aclose()
        _http_client = None


auth_scheme = HTTPBearer(auto_error=False)

class CurrentUser(BaseModel):
    id: str
    email: str | None = None
    name: str | None = None

    def to_author(self) -> Author:
        return Author(id=self.id, email=self.email, name=self.name)

async def get_current_user(
    cred: HTTPAuthorizationCredentials | None = Depends(auth_scheme),
    supa: Client = Depends(get_supabase),
) -> CurrentUser:
    """
    Takes Authorization: Bearer <access_token> issued by Supabase,
    validates it against the auth service and returns the minimal user data.
    """
    if cred is None or cred.scheme.lower() != "bearer":
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing token")

    token = cred.credentials
    try:
        res = supa.auth.get_user(token)
        user = res.user
        if not user:
            raise HTTPException(status_code=401, detail="Invalid token")

        name = None
        meta = getattr(user, "user_metadata", None) or {}
        if isinstance(meta, dict):
            name = meta.get("name")

        return CurrentUser(id=str(user.id), email=user.email, name=name)
    except HTTPException:
        raise
    except Exception:
        raise HTTPException(status_code=401, detail="Invalid/expired token")


def get_language_context(
    lang: Optional[str] = Query(default=None, description="Active language (en|am)"),
    accept_language: Optional[str] = Header(default=None),
) -> LanguageContext:
    if lang:
        return LanguageContext(resolve_language(lang, settings.DEFAULT_LANGUAGE))
    if accept_language:
        preferred = accept_language.split(",")[0].split(";")[0]
        return LanguageContext(resolve_language(preferred, settings.DEFAULT_LANGUAGE))
    return LanguageContext(settings.DEFAULT_LANGUAGE)


def get_recipe_repository(supa: Client = Depends(get_supabase)) -> RecipeRepository:
    return SupabaseRecipeRepository(supa, table_name=settings.RECIPES_TABLE)


def get_translation_pipeline(
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> TranslationPipeline:
    strategies = default_strategies(
        http_client,
        timeout=settings.TRANSLATION_TIMEOUT_SECONDS,
        mymemory_url=settings.MYMEMORY_API_URL,
        google_url=settings.GOOGLE_TRANSLATE_URL,
    )
    return TranslationPipeline(strategies)


def get_submission_service(
    repository: RecipeRepository = Depends(get_recipe_repository),
    pipeline: TranslationPipeline = Depends(get_translation_pipeline),
) -> RecipeSubmissionService:
    return RecipeSubmissionService(repository, pipeline)


def get_catalog_service(
    repository: RecipeRepository = Depends(get_recipe_repository),
) -> RecipeCatalogService:
    return RecipeCatalogService(repository)


def get_moderation_service(
    repository: RecipeRepository = Depends(get_recipe_repository),
) -> ModerationService:
    return ModerationService(repository)
