"""A single-page form that builds a recipe from its fields."""

from __future__ import annotations

import logging
from typing import List, Optional

from recipebook.recipe import Recipe
from recipebook.storable import Signal
from recipebook.wrappers import RecipeWrapper

logger = logging.getLogger(__name__)

SPIN_MIN = 0
SPIN_MAX = 99
PREP_TIME_SUFFIX = " mins"
SUBMIT_TEXT = "Create Recipe"
SHARED_TEXT = "Shared"


def _clamp(value: int) -> int:
    return max(SPIN_MIN, min(SPIN_MAX, int(value)))


class RecipeForm:
    """Collects every property of a recipe and creates it on submission.

    The numeric inputs accept values between ``SPIN_MIN`` and ``SPIN_MAX``;
    anything outside is clamped. ``recipe_created`` is emitted with the new
    wrapper on each submission.
    """

    def __init__(self) -> None:
        self.recipe_created = Signal()
        self.name = ""
        self.description = ""
        self.notes = ""
        self.is_shared = False
        self.instructions: List[str] = []
        self.equipment: List[str] = []
        self.new_instruction = ""
        self.new_equipment = ""
        self._prep_time = SPIN_MIN
        self._like_count = SPIN_MIN
        self._recipe_wrapper: Optional[RecipeWrapper] = None

    @property
    def prep_time(self) -> int:
        return self._prep_time

    @prep_time.setter
    def prep_time(self, value: int) -> None:
        self._prep_time = _clamp(value)

    @property
    def like_count(self) -> int:
        return self._like_count

    @like_count.setter
    def like_count(self, value: int) -> None:
        self._like_count = _clamp(value)

    @property
    def recipe_wrapper(self) -> Optional[RecipeWrapper]:
        """The wrapper created by the latest submission, if any."""
        return self._recipe_wrapper

    def submit(self) -> RecipeWrapper:
        """Create a new recipe from the form's content and announce it."""
        wrapper = RecipeWrapper(Recipe())
        wrapper.name = self.name
        wrapper.description = self.description
        wrapper.notes = self.notes
        wrapper.prep_time = self.prep_time
        wrapper.is_shared = self.is_shared
        wrapper.like_count = self.like_count
        for instruction in self.instructions:
            wrapper.add_instruction(instruction)
        for item in self.equipment:
            wrapper.add_equipment(item)

        self._recipe_wrapper = wrapper
        logger.debug("Created Recipe with wrapper: %s", wrapper.id)
        self.recipe_created.emit(wrapper)
        return wrapper