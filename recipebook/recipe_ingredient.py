"""The link between a recipe and one of its ingredients."""

from __future__ import annotations

import uuid

from recipebook.storable import Storable


class RecipeIngredient(Storable):
    """An ingredient used in a recipe, with its quantity and unit."""

    def __init__(
        self,
        recipe_id: uuid.UUID,
        ingredient_id: uuid.UUID,
        quantity: str,
        unit: str,
    ) -> None:
        super().__init__()
        self.recipe_id = recipe_id
        self.ingredient_id = ingredient_id
        self.quantity = quantity
        self.unit = unit

    def __repr__(self) -> str:
        return (
            f"RecipeIngredient(id={self.id!s}, recipe_id={self.recipe_id!s}, "
            f"ingredient_id={self.ingredient_id!s}, quantity={self.quantity!r}, "
            f"unit={self.unit!r})"
        )