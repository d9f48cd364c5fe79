"""A named ingredient with a description."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Ingredient:
    """An ingredient; both fields default to empty strings."""

    name: str = ""
    description: str = ""