from __future__ import annotations

from typing import Protocol, Sequence

from .models import Recipe


class RecipeRepository(Protocol):
    """Protocol describing the behaviour required by the web layer."""

    def list_recipes(self) -> Sequence[Recipe]:
        """Return every recipe in creation order."""

    def get_recipe(self, recipe_id: int) -> Recipe:
        """Return a single recipe or raise :class:`KeyError` if missing."""


__all__ = ["RecipeRepository"]
