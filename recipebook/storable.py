"""Signals and the base class for objects identified by a UUID."""

from __future__ import annotations

import uuid
from typing import Any, Callable, List, Optional

Slot = Callable[..., Any]


class Signal:
    """A list of callables notified when the signal is emitted."""

    def __init__(self) -> None:
        self._slots: List[Slot] = []

    def connect(self, slot: Slot) -> None:
        """Register ``slot`` to be called on every emission."""
        self._slots.append(slot)

    def disconnect(self, slot: Slot) -> None:
        """Remove one registration of ``slot``; raise ValueError if absent."""
        try:
            self._slots.remove(slot)
        except ValueError:
            raise ValueError("slot is not connected to this signal") from None

    def emit(self, *args: Any) -> None:
        """Call every connected slot, in connection order, with ``args``."""
        for slot in list(self._slots):
            slot(*args)

    def __len__(self) -> int:
        return len(self._slots)


class Storable:
    """An object with a persistent identifier.

    A missing or nil identifier is replaced by a freshly generated one.
    """

    def __init__(self, id: Optional[uuid.UUID] = None) -> None:
        self.id_changed = Signal()
        if id is None or id.int == 0:
            id = uuid.uuid4()
        self._id = id

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @id.setter
    def id(self, value: uuid.UUID) -> None:
        self._id = value
        self.id_changed.emit()