from __future__ import annotations


class RecipeError(Exception):
    pass


class RecipeNotFoundError(RecipeError):
    def __init__(self, recipe_id: str):
        super().__init__(f"Recipe not found: {recipe_id}")
        self.recipe_id = recipe_id


class PersistenceError(RecipeError):
    def __init__(self, operation: str, reason: str):
        super().__init__(f"Recipe store error during {operation}: {reason}")
        self.operation = operation
        self.reason = reason


class InvalidDraftError(RecipeError):
    def __init__(self, missing_fields: list[str], message: str | None = None):
        super().__init__(message or f"Missing required fields: {', '.join(missing_fields)}")
        self.missing_fields = missing_fields
