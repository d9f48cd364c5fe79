"""Boxes that display a model object: size, colours, hover and click state."""

from __future__ import annotations

import colorsys
import logging
from abc import ABC, abstractmethod
from typing import Generic, List, NamedTuple, Optional, Tuple, TypeVar

from recipebook.storable import Signal
from recipebook.wrappers import IngredientWrapper, RecipeWrapper

logger = logging.getLogger(__name__)

HOVER_SCALE = 1.05
NORMAL_SCALE = 1.0
DEFAULT_ANIMATION_DURATION = 200


class Color(NamedTuple):
    """An RGBA colour with 8-bit channels."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Parse ``#rrggbb`` or ``#aarrggbb``."""
        digits = text.lstrip("#")
        if len(digits) not in (6, 8):
            raise ValueError(f"invalid colour: {text!r}")
        try:
            value = int(digits, 16)
        except ValueError:
            raise ValueError(f"invalid colour: {text!r}") from None
        alpha = (value >> 24) & 0xFF if len(digits) == 8 else 255
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, alpha)

    def darker(self, factor: int = 200) -> "Color":
        """Return the colour with its value divided by ``factor`` percent."""
        if factor <= 0:
            return self
        if factor < 100:
            return self.lighter(10000 // factor)
        h, s, v = colorsys.rgb_to_hsv(self.red / 255, self.green / 255, self.blue / 255)
        return self._from_hsv(h, s, v * 100 / factor)

    def lighter(self, factor: int = 150) -> "Color":
        """Return the colour with its value multiplied by ``factor`` percent."""
        if factor <= 0:
            return self
        if factor < 100:
            return self.darker(10000 // factor)
        h, s, v = colorsys.rgb_to_hsv(self.red / 255, self.green / 255, self.blue / 255)
        v = v * factor / 100
        if v > 1.0:
            s = max(0.0, s - (v - 1.0))
            v = 1.0
        return self._from_hsv(h, s, v)

    def _from_hsv(self, h: float, s: float, v: float) -> "Color":
        r, g, b = colorsys.hsv_to_rgb(h, s, v)
        return Color(round(r * 255), round(g * 255), round(b * 255), self.alpha)


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
TRANSPARENT = Color(0, 0, 0, 0)
SHADOW_COLOR = Color(0, 0, 0, 60)
HOVER_SHADOW_COLOR = Color(0, 0, 0, 100)
SHADOW_BLUR_RADIUS = 10.0
HOVER_SHADOW_BLUR_RADIUS = 20.0


class DisplayBox:
    """A rounded box that grows slightly while hovered."""

    def __init__(self, width: int = 0, height: int = 0, radius: int = 0) -> None:
        self.width = width
        self.height = height
        self.radius = radius
        self.scale_factor = NORMAL_SCALE
        self.background_color: Optional[Color] = None
        self.border_color = TRANSPARENT
        self.text_color = BLACK
        self.animation_duration = DEFAULT_ANIMATION_DURATION
        self.shadow_color = SHADOW_COLOR
        self.shadow_blur_radius = SHADOW_BLUR_RADIUS
        self.style_sheet = ""

    def enter(self) -> None:
        """The pointer entered the box: scale up."""
        self.scale_factor = HOVER_SCALE

    def leave(self) -> None:
        """The pointer left the box: return to normal size."""
        self.scale_factor = NORMAL_SCALE

    def size_hint(self) -> Tuple[int, int]:
        return (self.width, self.height)


W = TypeVar("W")


class _ObjectDisplayBox(DisplayBox, ABC, Generic[W]):
    """A display box showing one wrapped model object."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(width, height, 0)
        self.wrapper_changed = Signal()
        self._wrapper: Optional[W] = None
        self._connections: List[Signal] = []
        self.wrapper_changed.connect(self._connect_wrapper)

    @property
    def wrapper(self) -> Optional[W]:
        return self._wrapper

    @abstractmethod
    def _update_display(self) -> None:
        """Refresh the labels from the wrapper."""

    @abstractmethod
    def _wrapper_signals(self, wrapper: W) -> List[Signal]:
        """The wrapper's signals that should refresh the display."""

    def _disconnect_wrapper(self) -> None:
        for signal in self._connections:
            signal.disconnect(self._update_display)
        self._connections = []

    def _connect_wrapper(self) -> None:
        self._disconnect_wrapper()
        if self._wrapper is None:
            return
        for signal in self._wrapper_signals(self._wrapper):
            signal.connect(self._update_display)
            self._connections.append(signal)

    def set_wrapper(self, wrapper: Optional[W]) -> None:
        """Show ``wrapper`` and follow its changes."""
        self._wrapper = wrapper
        if wrapper is not None:
            self._update_display()
            self.wrapper_changed.emit()


RECIPE_INGREDIENT_STYLE = "background: #e8f5e9; border: 2px solid #81c784;"
PLAIN_INGREDIENT_STYLE = "background: #fff3e0; border: 2px solid #ffb74d;"


class IngredientDisplayBox(_ObjectDisplayBox[IngredientWrapper]):
    """Shows an ingredient's name and description."""

    def __init__(self) -> None:
        super().__init__(300, 150)
        self.name_label = ""
        self.description_label = ""

    def _wrapper_signals(self, wrapper: IngredientWrapper) -> List[Signal]:
        return [wrapper.name_changed, wrapper.description_changed]

    def _update_display(self) -> None:
        wrapper = self._wrapper
        if wrapper is None:
            return
        self.name_label = wrapper.name
        self.description_label = wrapper.description
        self.style_sheet = (
            RECIPE_INGREDIENT_STYLE if wrapper.is_recipe else PLAIN_INGREDIENT_STYLE
        )

    def set_wrapper(self, wrapper: Optional[IngredientWrapper]) -> None:
        super().set_wrapper(wrapper)


class RecipeDisplayBox(_ObjectDisplayBox[RecipeWrapper]):
    """Shows a recipe summary; emits ``clicked`` on a completed click."""

    NORMAL_COLOR = Color.from_hex("#f3e5f5")
    HOVER_COLOR = Color.from_hex("#e1bee7")

    def __init__(self) -> None:
        super().__init__(300, 200)
        self.clicked = Signal()
        self.normal_color = self.NORMAL_COLOR
        self.hover_color = self.HOVER_COLOR
        self.background_color = self.normal_color
        self.name_label = ""
        self.details_label = ""
        self.stats_label = ""
        self.pressed = False

    def _wrapper_signals(self, wrapper: RecipeWrapper) -> List[Signal]:
        return [
            wrapper.name_changed,
            wrapper.instructions_changed,
            wrapper.equipment_changed,
            wrapper.prep_time_changed,
            wrapper.like_count_changed,
        ]

    def _update_display(self) -> None:
        wrapper = self._wrapper
        if wrapper is None:
            self.name_label = ""
            self.details_label = ""
            self.stats_label = ""
            return
        self.name_label = wrapper.name
        self.details_label = (
            f"{len(wrapper.instructions)} instructions • "
            f"{len(wrapper.equipment)} equipment items"
        )
        self.stats_label = (
            f"Prep time: {wrapper.prep_time} mins • Likes: {wrapper.like_count}"
        )

    def set_wrapper(self, wrapper: Optional[RecipeWrapper]) -> None:
        super().set_wrapper(wrapper)

    def enter(self) -> None:
        """Highlight the box and deepen its shadow."""
        super().enter()
        self.background_color = self.hover_color
        self.shadow_blur_radius = HOVER_SHADOW_BLUR_RADIUS
        self.shadow_color = HOVER_SHADOW_COLOR

    def leave(self) -> None:
        """Restore the normal colour and shadow."""
        super().leave()
        self.background_color = self.normal_color
        self.shadow_blur_radius = SHADOW_BLUR_RADIUS
        self.shadow_color = SHADOW_COLOR

    def press(self) -> None:
        """A primary-button press: darken the background."""
        self.pressed = True
        if self.background_color is not None:
            self.background_color = self.background_color.darker(110)

    def release(self, inside: bool) -> None:
        """A primary-button release; a click counts only when ``inside``."""
        if not self.pressed:
            return
        self.pressed = False
        if inside:
            if self._wrapper is not None:
                logger.debug("Recipe %s clicked", self._wrapper.id)
            self.clicked.emit()