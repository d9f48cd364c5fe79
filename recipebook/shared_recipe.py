"""A recipe shared publicly, with a like counter."""

from __future__ import annotations

import uuid
from typing import Optional

from recipebook.storable import Storable

_UINT32_MASK = 0xFFFFFFFF


class SharedRecipe(Storable):
    """A shared copy of a recipe; the like count is an unsigned 32-bit value."""

    def __init__(
        self,
        original_recipe_id: Optional[uuid.UUID] = None,
        author_id: Optional[uuid.UUID] = None,
        like_count: int = 0,
        id: Optional[uuid.UUID] = None,
    ) -> None:
        super().__init__(id)
        self._original_recipe_id = original_recipe_id
        self._author_id = author_id
        self._like_count = like_count & _UINT32_MASK

    @property
    def original_recipe_id(self) -> Optional[uuid.UUID]:
        return self._original_recipe_id

    @property
    def author_id(self) -> Optional[uuid.UUID]:
        return self._author_id

    @property
    def like_count(self) -> int:
        return self._like_count

    def add_like(self, user: uuid.UUID) -> None:
        """Record a like from ``user``."""
        self._like_count = (self._like_count + 1) & _UINT32_MASK

    def remove_like(self, user: uuid.UUID) -> None:
        """Withdraw a like from ``user``."""
        self._like_count = (self._like_count - 1) & _UINT32_MASK