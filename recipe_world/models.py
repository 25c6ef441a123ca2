from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Recipe:
    """Domain object representing a generated recipe card."""

    id: int
    name: str
    description: str
    ingredients: str
    instructions: str


class ScreenState(str, Enum):
    """The top-level screen currently shown to the user."""

    ONBOARDING = "onboarding"
    RECIPE_LIST = "recipe_list"


__all__ = ["Recipe", "ScreenState"]
