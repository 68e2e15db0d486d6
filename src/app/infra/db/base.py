# src/app/infra/db/base.py
"""
Abstract base class for the recipe store.
This interface allows easy swapping between different document backends.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Optional


class RecipeRepository(ABC):
    """
    Abstract interface for persisted recipe documents.

    Records are returned raw because older clients may have written
    single-language (legacy) documents.

    Implementations:
    - SupabaseRecipeRepository: Postgres table via Supabase
    """

    @abstractmethod
    def create(self, document: dict[str, Any]) -> str:
        """
        Insert one bilingual recipe document.

        Args:
            document: Fully translated document, written once

        Returns:
            The id assigned by the store
        """
        pass

    @abstractmethod
    def get(self, recipe_id: str) -> dict[str, Any]:
        """
        Fetch one raw record.

        Raises:
            RecipeNotFoundError: If no record has this id
        """
        pass

    @abstractmethod
    def list_recipes(
        self,
        approved: Optional[bool] = None,
        limit: int = 100,
    ) -> list[dict[str, Any]]:
        """
        List raw records, newest first.

        Args:
            approved: Filter by approval flag (None = all)
            limit: Maximum number of records
        """
        pass

    @abstractmethod
    def approve(self, recipe_id: str, reviewed_at: datetime) -> bool:
        """Set the approval flag and review timestamp."""
        pass

    @abstractmethod
    def delete(self, recipe_id: str) -> bool:
        """Remove a record (moderator rejection)."""
        pass
