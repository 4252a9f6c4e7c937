"""A terminal card matching puzzle: JSON levels, a rules controller, text views and undo."""

__version__ = "0.1.0"