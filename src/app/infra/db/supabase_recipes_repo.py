from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Any, Optional

import httpx
from postgrest.exceptions import APIError
from supabase import Client, create_client

from src.app.domain.errors import PersistenceError, RecipeNotFoundError
from src.app.infra.db.base import RecipeRepository

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "recipes"
STORE_ERRORS = (APIError, httpx.HTTPError, ConnectionError, TimeoutError)


def _create_supabase_client() -> Client:
    url = os.getenv("SUPABASE_URL")
    key = os.getenv("SUPABASE_SERVICE_ROLE_KEY")
    if not url or not key:
        raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY required")
    return create_client(url, key)


class SupabaseRecipeRepository(RecipeRepository):
    def __init__(self, client: Client | None = None, table_name: str = DEFAULT_TABLE):
        self._client = client or _create_supabase_client()
        self.table_name = table_name
        logger.info("SupabaseRecipeRepository initialized (table=%s)", table_name)

    def _table(self):
        return self._client.table(self.table_name)

    def create(self, document: dict[str, Any]) -> str:
        try:
            result = self._table().insert(document).execute()
        except STORE_ERRORS as error:
            logger.error("Failed to insert recipe: %s", error)
            raise PersistenceError("create", str(error)) from error

        if not result.data or not result.data[0].get("id"):
            raise PersistenceError("create", "store returned no id")

        recipe_id = str(result.data[0]["id"])
        logger.info(
            "Created recipe: id=%s, author=%s, language=%s",
            recipe_id,
            document.get("author_id"),
            document.get("original_language"),
        )
        return recipe_id

    def get(self, recipe_id: str) -> dict[str, Any]:
        try:
            result = self._table().select("*").eq("id", recipe_id).limit(1).execute()
        except STORE_ERRORS as error:
            logger.error("Failed to fetch recipe %s: %s", recipe_id, error)
            raise PersistenceError("get", str(error)) from error

        if not result.data:
            raise RecipeNotFoundError(recipe_id)
        return result.data[0]

    def list_recipes(
        self,
        approved: Optional[bool] = None,
        limit: int = 100,
    ) -> list[dict[str, Any]]:
        try:
            query = self._table().select("*")
            if approved is not None:
                query = query.eq("approved", approved)
            result = query.order("created_at", desc=True).limit(limit).execute()
        except STORE_ERRORS as error:
            logger.error("Failed to list recipes: %s", error)
            raise PersistenceError("list", str(error)) from error

        return list(result.data or [])

    def approve(self, recipe_id: str, reviewed_at: datetime) -> bool:
        update = {"approved": True, "reviewed_at": reviewed_at.isoformat()}
        try:
            result = self._table().update(update).eq("id", recipe_id).execute()
        except STORE_ERRORS as error:
            logger.error("Failed to approve recipe %s: %s", recipe_id, error)
            raise PersistenceError("approve", str(error)) from error

        if not result.data:
            raise RecipeNotFoundError(recipe_id)
        logger.info("Approved recipe: id=%s", recipe_id)
        return True

    def delete(self, recipe_id: str) -> bool:
        try:
            result = self._table().delete().eq("id", recipe_id).execute()
        except STORE_ERRORS as error:
            logger.error("Failed to delete recipe %s: %s", recipe_id, error)
            raise PersistenceError("delete", str(error)) from error

        if not result.data:
            raise RecipeNotFoundError(recipe_id)
        logger.info("Deleted recipe: id=%s", recipe_id)
        return True
