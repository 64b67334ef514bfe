"""Textual host for the converter.

The app module is not imported here so the adapter stays usable without
Textual installed.
"""

from .controller import TextualSyncAdapter, TextualUIHooks

__all__ = ["TextualSyncAdapter", "TextualUIHooks"]
