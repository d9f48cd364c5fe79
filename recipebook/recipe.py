"""A recipe: an ingredient with instructions, equipment and sharing state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from recipebook.ingredient import Ingredient


@dataclass
class Recipe(Ingredient):
    """A recipe. Two recipes are equal when every field is equal."""

    instructions: List[str] = field(default_factory=list)
    equipment: List[str] = field(default_factory=list)
    notes: str = ""
    prep_time: int = 0
    is_shared: bool = False
    like_count: int = 0

    def add_instruction(self, instruction: str) -> None:
        self.instructions.append(instruction)

    def remove_instruction(self, instruction: str) -> None:
        """Remove every instruction equal to ``instruction``."""
        self.instructions[:] = [i for i in self.instructions if i != instruction]

    def remove_instruction_at(self, index: int) -> None:
        """Remove the instruction at ``index``; out-of-range indices are ignored."""
        if 0 <= index < len(self.instructions):
            del self.instructions[index]

    def add_equipment(self, equipment: str) -> None:
        self.equipment.append(equipment)

    def remove_equipment(self, equipment: str) -> None:
        """Remove every equipment item equal to ``equipment``."""
        self.equipment[:] = [e for e in self.equipment if e != equipment]

    def remove_equipment_at(self, index: int) -> None:
        """Remove the equipment item at ``index``; out-of-range indices are ignored."""
        if 0 <= index < len(self.equipment):
            del self.equipment[index]

    def toggle_shared(self) -> None:
        self.is_shared = not self.is_shared