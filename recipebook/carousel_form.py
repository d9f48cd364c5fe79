"""A multi-step form shown one step at a time."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from recipebook.form_fields import FormField, TextAreaField, TextField, TextListField
from recipebook.storable import Signal

logger = logging.getLogger(__name__)

NEXT_ARROW = "→"
PREVIOUS_ARROW = "←"
FINISH_MARK = "✓"


class CarouselForm:
    """Steps through form fields, validating each before moving on.

    ``form_completed`` is emitted with the merged data of every step when
    moving forward from the last step.
    """

    width = 600
    height = 400

    def __init__(self) -> None:
        self.form_completed = Signal()
        self._steps: List[FormField] = []
        self.current_index = 0
        self.previous_enabled = True
        self.next_enabled = True
        self.previous_text = PREVIOUS_ARROW
        self.next_text = NEXT_ARROW

    @property
    def steps(self) -> List[FormField]:
        return list(self._steps)

    @property
    def current_step(self) -> Optional[FormField]:
        if not self._steps:
            return None
        return self._steps[self.current_index]

    def _update_buttons(self) -> None:
        has_steps = bool(self._steps)
        is_first = self.current_index == 0
        is_last = self.current_index == len(self._steps) - 1

        self.previous_enabled = has_steps and not is_first
        if has_steps:
            step = self.current_step
            self.next_enabled = step.validate() if step is not None else True
            self.next_text = FINISH_MARK if is_last else NEXT_ARROW
        else:
            self.next_enabled = False

    def _transition(self, new_index: int) -> None:
        self.current_index = new_index
        self._update_buttons()

    def add_form_step(self, step: Optional[FormField]) -> None:
        """Append ``step``; ``None`` is ignored with a warning."""
        if step is None:
            logger.warning("Attempted to add null form step")
            return

        self._steps.append(step)

        def on_valid_changed(valid: bool) -> None:
            if self.current_step is step:
                self.next_enabled = valid and (
                    self.current_index < len(self._steps) - 1
                )

        step.valid_changed.connect(on_valid_changed)
        self._update_buttons()
        logger.debug("There are currently %d steps", len(self._steps))

    def show_next(self) -> None:
        """Advance one step, or submit the form from the last step."""
        if self.current_index >= len(self._steps) - 1:
            form_data: Dict[str, Any] = {}
            for step in self._steps:
                form_data.update(step.data())
            logger.debug("Form submitted with data %r", form_data)
            self.form_completed.emit(form_data)
            return

        step = self.current_step
        if step is not None and not step.validate():
            return
        self._transition(self.current_index + 1)

    def show_previous(self) -> None:
        """Go back one step; does nothing on the first step."""
        if self.current_index <= 0:
            return
        self._transition(self.current_index - 1)

    def current_step_data_changed(self) -> None:
        """Re-evaluate the navigation state after the current step changed."""
        self._update_buttons()


class RecipeCarouselForm(CarouselForm):
    """The step-by-step form for creating a recipe."""

    def __init__(self) -> None:
        super().__init__()
        self.add_form_step(TextField("name", "Enter the Recipe's Name"))
        self.add_form_step(
            TextAreaField("description", "Enter a description of your Recipe")
        )

        instructions = TextListField(
            "instructions", "What are the steps to making this Recipe?", False
        )
        self.add_form_step(instructions)
        instructions.field_changed.connect(self.current_step_data_changed)

        self.add_form_step(
            TextAreaField(
                "notes",
                "Are there any special notes that should be "
                "kept in mind when making this Recipe?",
            )
        )

        equipment = TextListField(
            "equipment", "What equipment is required to make this recipe?"
        )
        self.add_form_step(equipment)
        equipment.field_changed.connect(self.current_step_data_changed)