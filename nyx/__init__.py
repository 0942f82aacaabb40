"""Core of a modal text editor: text buffer, undo history, jump list and git gutter markers."""

__version__ = "0.1.0"