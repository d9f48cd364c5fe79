"""Form steps that collect a single named value each."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional

from recipebook.storable import Signal

logger = logging.getLogger(__name__)

DEFAULT_MAX_LENGTH = 2048


class FormField(ABC):
    """A validatable step of a form.

    ``valid_changed`` is emitted with the new validity whenever the
    field's content changes.
    """

    def __init__(self) -> None:
        self.title = ""
        self.valid_changed = Signal()

    @abstractmethod
    def validate(self) -> bool:
        """Return whether the current content is acceptable."""

    @abstractmethod
    def data(self) -> Dict[str, Any]:
        """Return the collected content keyed by the field name."""


class TextField(FormField):
    """A single line of text that must not be blank."""

    def __init__(self, field: str, label: str) -> None:
        super().__init__()
        self.field = field
        self.label = label
        self._text = ""
        # Mirrors the validity shown by the input's styling; unset until edited.
        self.input_valid: Optional[bool] = None
        self.valid_changed.connect(self._restyle)

    def _restyle(self, valid: bool) -> None:
        self.input_valid = valid

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        """Replace the text, emitting ``valid_changed`` if it changed."""
        if text != self._text:
            self._text = text
            self.valid_changed.emit(self.validate())

    def validate(self) -> bool:
        return bool(self._text.strip())

    def data(self) -> Dict[str, Any]:
        return {self.field: self._text}


class TextAreaField(FormField):
    """Multi-line text that must not be blank nor longer than ``max_length``."""

    def __init__(
        self, field: str, label: str, max_length: int = DEFAULT_MAX_LENGTH
    ) -> None:
        super().__init__()
        self.field = field
        self.label = label
        self.max_length = max_length
        self._text = ""

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        """Replace the text, emitting ``valid_changed`` if it changed."""
        if text != self._text:
            self._text = text
            self.valid_changed.emit(self.validate())

    def validate(self) -> bool:
        stripped = self._text.strip()
        return bool(stripped) and len(stripped) <= self.max_length

    def data(self) -> Dict[str, Any]:
        return {self.field: self._text}


class TextListField(FormField):
    """An editable list of text lines.

    When ``allowed_empty`` is false the list needs at least one item to be
    valid. ``field_changed`` is emitted after every addition or removal.
    """

    def __init__(self, field: str, label: str, allowed_empty: bool = True) -> None:
        super().__init__()
        self.field = field
        self.label = label
        self.allowed_empty = allowed_empty
        self.add_button_text = "Add"
        self.remove_button_text = "Remove"
        self.field_changed = Signal()
        self._items: List[str] = []

    @property
    def items(self) -> List[str]:
        return list(self._items)

    def add_item(self, text: str) -> None:
        """Append ``text`` to the list."""
        self._items.append(text)
        logger.debug("Added item %r", text)
        self.field_changed.emit()

    def remove_items(self, rows: Iterable[int]) -> None:
        """Remove the items at the given rows, as numbered before removal."""
        selected = set(rows)
        for row in selected:
            if not 0 <= row < len(self._items):
                raise IndexError(f"row {row} is out of range")
        for row in sorted(selected, reverse=True):
            logger.debug("Removing item %d", row)
            del self._items[row]
        self.field_changed.emit()

    def validate(self) -> bool:
        if self.allowed_empty:
            return True
        return bool(self._items)

    def data(self) -> Dict[str, Any]:
        return {self.field: list(self._items)}