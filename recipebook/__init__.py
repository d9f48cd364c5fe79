"""A personal recipe book: in-memory models, entry forms and a terminal front end."""

__version__ = "0.1.0"