"""
Pytest configuration shared by all tests.
"""

import os

# Settings are read at import time; seed them before any src.app import.
os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-role-key")
os.environ.setdefault("APP_ENV", "test")

from datetime import datetime
from typing import Any, Optional

import pytest

from src.app.domain.errors import PersistenceError, RecipeNotFoundError
from src.app.infra.db.base import RecipeRepository


class InMemoryRecipeRepository(RecipeRepository):
    def __init__(self) -> None:
        self.records: dict[str, dict[str, Any]] = {}
        self.create_calls = 0
        self.fail_with: Optional[PersistenceError] = None

    def create(self, document: dict[str, Any]) -> str:
        self.create_calls += 1
        if self.fail_with:
            raise self.fail_with
        recipe_id = f"recipe-{len(self.records) + 1}"
        self.records[recipe_id] = {"id": recipe_id, **document}
        return recipe_id

    def get(self, recipe_id: str) -> dict[str, Any]:
        if self.fail_with:
            raise self.fail_with
        if recipe_id not in self.records:
            raise RecipeNotFoundError(recipe_id)
        return self.records[recipe_id]

    def list_recipes(
        self,
        approved: Optional[bool] = None,
        limit: int = 100,
    ) -> list[dict[str, Any]]:
        rows = [
            row for row in self.records.values()
            if approved is None or bool(row.get("approved")) is approved
        ]
        rows.sort(key=lambda row: str(row.get("created_at") or ""), reverse=True)
        return rows[:limit]

    def approve(self, recipe_id: str, reviewed_at: datetime) -> bool:
        record = self.get(recipe_id)
        record["approved"] = True
        record["reviewed_at"] = reviewed_at.isoformat()
        return True

    def delete(self, recipe_id: str) -> bool:
        if recipe_id not in self.records:
            raise RecipeNotFoundError(recipe_id)
        del self.records[recipe_id]
        return True


@pytest.fixture
def recipe_repository() -> InMemoryRecipeRepository:
    return InMemoryRecipeRepository()
