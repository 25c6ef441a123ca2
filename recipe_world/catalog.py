from __future__ import annotations

import logging
import os
from typing import Dict, Sequence, Tuple

from .models import Recipe
from .storage import RecipeRepository


DEFAULT_RECIPE_COUNT = 13
DEFAULT_DESCRIPTION = "A delicious recipe for all occasions."

logger = logging.getLogger(__name__)


def build_recipe(index: int) -> Recipe:
    """Build the recipe shown at ``index``.

    Every quantity is a pure function of the position, so the same index always
    yields the same card.
    """

    flour_cups = index % 5 + 2
    eggs = index % 3 + 1
    sugar_cups = index % 2 + 1
    milk_cups = index % 4 + 1
    oven_temperature = 320 + index * 5
    bake_minutes = 20 + index % 10

    ingredients = "\n".join(
        [
            f"• {flour_cups} cups flour",
            f"• {eggs} eggs",
            f"• {sugar_cups} cup sugar",
            "• 1 tsp vanilla extract",
            f"• {milk_cups} cup milk",
        ]
    )
    instructions = "\n".join(
        [
            f"1. Preheat oven to {oven_temperature}°F",
            "2. Mix all ingredients in a bowl",
            "3. Pour into a baking dish",
            f"4. Bake for {bake_minutes} minutes",
            "5. Let cool and enjoy!",
        ]
    )

    return Recipe(
        id=index,
        name=f"Recipe {index + 1}",
        description=DEFAULT_DESCRIPTION,
        ingredients=ingredients,
        instructions=instructions,
    )


def _parse_count(raw: str) -> int:
    try:
        count = int(raw)
    except ValueError:
        raise ValueError(f"RECIPE_COUNT must be an integer, got {raw!r}.") from None

    if count < 0:
        raise ValueError(f"RECIPE_COUNT must not be negative, got {count}.")
    return count


class GeneratedRecipeCatalog(RecipeRepository):
    """Fixed, in-memory collection of recipes generated by position."""

    def __init__(self, count: int = DEFAULT_RECIPE_COUNT) -> None:
        if count < 0:
            raise ValueError(f"Recipe count must not be negative, got {count}.")

        self._recipes: Tuple[Recipe, ...] = tuple(build_recipe(index) for index in range(count))
        self._by_id: Dict[int, Recipe] = {recipe.id: recipe for recipe in self._recipes}
        logger.debug("Generated %d recipes", count)

    @classmethod
    def from_env(cls) -> "GeneratedRecipeCatalog":
        """Build a catalog sized by the ``RECIPE_COUNT`` environment variable."""

        raw = os.environ.get("RECIPE_COUNT")
        if raw is None or not raw.strip():
            return cls()
        return cls(count=_parse_count(raw.strip()))

    def list_recipes(self) -> Sequence[Recipe]:
        return self._recipes

    def get_recipe(self, recipe_id: int) -> Recipe:
        try:
            return self._by_id[recipe_id]
        except KeyError:
            raise KeyError(f"Recipe '{recipe_id}' does not exist.") from None


__all__ = ["DEFAULT_RECIPE_COUNT", "GeneratedRecipeCatalog", "build_recipe"]
