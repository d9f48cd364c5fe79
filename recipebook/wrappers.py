"""Observable wrappers around the plain model objects.

Each wrapper owns a copy of a model object, gives it a persistent identifier
and emits a signal whenever one of its properties actually changes.
"""

from __future__ import annotations

import copy
import hashlib
import uuid
from typing import List, Optional

from recipebook.ingredient import Ingredient
from recipebook.recipe import Recipe
from recipebook.storable import Signal, Storable
from recipebook.user import User

_UINT32_MASK = 0xFFFFFFFF


class IngredientWrapper(Storable):
    """An observable ingredient."""

    def __init__(
        self,
        ingredient: Optional[Ingredient] = None,
        id: Optional[uuid.UUID] = None,
    ) -> None:
        super().__init__(id)
        self.name_changed = Signal()
        self.description_changed = Signal()
        self._ingredient = copy.deepcopy(ingredient) if ingredient else Ingredient()
        self._is_recipe = False
        self._linked_recipe_id: Optional[uuid.UUID] = None

    @property
    def ingredient(self) -> Ingredient:
        return self._ingredient

    @property
    def is_recipe(self) -> bool:
        return self._is_recipe

    @property
    def linked_recipe_id(self) -> Optional[uuid.UUID]:
        return self._linked_recipe_id

    @property
    def name(self) -> str:
        return self._ingredient.name

    @name.setter
    def name(self, value: str) -> None:
        if self._ingredient.name != value:
            self._ingredient.name = value
            self.name_changed.emit()

    @property
    def description(self) -> str:
        return self._ingredient.description

    @description.setter
    def description(self, value: str) -> None:
        if self._ingredient.description != value:
            self._ingredient.description = value
            self.description_changed.emit()


class RecipeWrapper(Storable):
    """An observable recipe."""

    def __init__(
        self,
        recipe: Optional[Recipe] = None,
        id: Optional[uuid.UUID] = None,
    ) -> None:
        super().__init__(id)
        self.name_changed = Signal()
        self.description_changed = Signal()
        self.instructions_changed = Signal()
        self.equipment_changed = Signal()
        self.notes_changed = Signal()
        self.prep_time_changed = Signal()
        self.is_shared_changed = Signal()
        self.like_count_changed = Signal()
        self._recipe = copy.deepcopy(recipe) if recipe is not None else Recipe()

    @property
    def recipe(self) -> Recipe:
        return self._recipe

    @property
    def name(self) -> str:
        return self._recipe.name

    @name.setter
    def name(self, value: str) -> None:
        if self._recipe.name != value:
            self._recipe.name = value
            self.name_changed.emit()

    @property
    def description(self) -> str:
        return self._recipe.description

    @description.setter
    def description(self, value: str) -> None:
        if self._recipe.description != value:
            self._recipe.description = value
            self.description_changed.emit()

    @property
    def instructions(self) -> List[str]:
        """A copy of the recipe's instructions."""
        return list(self._recipe.instructions)

    @property
    def equipment(self) -> List[str]:
        """A copy of the recipe's equipment list."""
        return list(self._recipe.equipment)

    @property
    def notes(self) -> str:
        return self._recipe.notes

    @notes.setter
    def notes(self, value: str) -> None:
        if self._recipe.notes != value:
            self._recipe.notes = value
            self.notes_changed.emit()

    @property
    def prep_time(self) -> int:
        return self._recipe.prep_time

    @prep_time.setter
    def prep_time(self, value: int) -> None:
        value &= _UINT32_MASK
        if self._recipe.prep_time != value:
            self._recipe.prep_time = value
            self.prep_time_changed.emit()

    @property
    def is_shared(self) -> bool:
        return self._recipe.is_shared

    @is_shared.setter
    def is_shared(self, value: bool) -> None:
        value = bool(value)
        if self._recipe.is_shared != value:
            self._recipe.is_shared = value
            self.is_shared_changed.emit()

    @property
    def like_count(self) -> int:
        return self._recipe.like_count

    @like_count.setter
    def like_count(self, value: int) -> None:
        value &= _UINT32_MASK
        if self._recipe.like_count != value:
            self._recipe.like_count = value
            self.like_count_changed.emit()

    def add_instruction(self, instruction: str) -> None:
        self._recipe.add_instruction(instruction)
        self.instructions_changed.emit()

    def remove_instruction(self, instruction: str) -> None:
        """Remove every instruction equal to ``instruction``."""
        self._recipe.remove_instruction(instruction)
        self.instructions_changed.emit()

    def remove_instruction_at(self, index: int) -> None:
        """Remove the instruction at ``index``; out-of-range indices are ignored."""
        self._recipe.remove_instruction_at(index)
        self.instructions_changed.emit()

    def add_equipment(self, equipment: str) -> None:
        self._recipe.add_equipment(equipment)
        self.equipment_changed.emit()

    def remove_equipment(self, equipment: str) -> None:
        """Remove every equipment item equal to ``equipment``."""
        self._recipe.remove_equipment(equipment)
        self.equipment_changed.emit()

    def remove_equipment_at(self, index: int) -> None:
        """Remove the equipment item at ``index``; out-of-range indices are ignored."""
        self._recipe.remove_equipment_at(index)
        self.equipment_changed.emit()

    def toggle_shared(self) -> None:
        self._recipe.toggle_shared()
        self.is_shared_changed.emit()

    def equals(self, other: "RecipeWrapper") -> bool:
        """Two wrappers are the same recipe when their identifiers match."""
        return self.id == other.id


class UserWrapper(Storable):
    """An observable user account."""

    def __init__(
        self,
        user: Optional[User] = None,
        id: Optional[uuid.UUID] = None,
    ) -> None:
        super().__init__(id)
        self.username_changed = Signal()
        self.password_hash_changed = Signal()
        self.shared_recipes_changed = Signal()
        self._user = copy.deepcopy(user) if user is not None else User()
        self._shared_recipes: List[RecipeWrapper] = []

    @property
    def user(self) -> User:
        return self._user

    @property
    def username(self) -> str:
        return self._user.username

    @username.setter
    def username(self, value: str) -> None:
        if self._user.username != value:
            self._user.username = value
            self.username_changed.emit()

    @property
    def password_hash(self) -> str:
        return self._user.password_hash

    @property
    def shared_recipes(self) -> List[RecipeWrapper]:
        return list(self._shared_recipes)

    def set_password(self, plain_password: str) -> None:
        """Store the hex SHA-256 digest of ``plain_password``."""
        digest = hashlib.sha256(plain_password.encode("utf-8")).hexdigest()
        self._user.password_hash = digest
        self.password_hash_changed.emit()

    def authenticate(self, password: str) -> bool:
        """Compare ``password`` with the stored hash directly."""
        return self._user.authenticate(password)

    def add_shared_recipe(self, recipe: RecipeWrapper) -> None:
        self._user.add_shared_recipe(recipe.recipe)
        self.shared_recipes_changed.emit()

    def remove_shared_recipe(self, recipe: RecipeWrapper) -> None:
        self._user.remove_shared_recipe(recipe.recipe)
        self.shared_recipes_changed.emit()

    def _wrap(self, recipe: Recipe) -> RecipeWrapper:
        return RecipeWrapper(recipe)