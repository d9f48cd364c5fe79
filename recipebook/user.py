"""A user account holding shared recipes."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import List

from recipebook.recipe import Recipe


@dataclass
class User:
    """A user with a stored password hash and a list of shared recipes."""

    username: str = ""
    password_hash: str = ""
    shared_recipes: List[Recipe] = field(default_factory=list)

    def add_shared_recipe(self, recipe: Recipe) -> None:
        """Store a copy of ``recipe``."""
        self.shared_recipes.append(copy.deepcopy(recipe))

    def remove_shared_recipe(self, recipe: Recipe) -> None:
        """Remove the first shared recipe equal to ``recipe``, if any."""
        try:
            self.shared_recipes.remove(recipe)
        except ValueError:
            pass

    def authenticate(self, password: str) -> bool:
        """Compare ``password`` with the stored hash directly."""
        return password == self.password_hash