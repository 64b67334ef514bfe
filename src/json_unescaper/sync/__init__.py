"""Two-buffer synchronisation driven by the active direction."""

from json_unescaper.direction import Direction, Side

from .bus import EVENTS, SyncBus
from .controller import SyncController
from .state import SyncResult, SyncSnapshot, SyncState

__all__ = [
    "EVENTS",
    "Direction",
    "Side",
    "SyncBus",
    "SyncController",
    "SyncResult",
    "SyncSnapshot",
    "SyncState",
]
