"""rewind: value-agnostic linear undo/redo history.

The core is rewind.history (pure transitions over an immutable History);
rewind.store wraps it for callers that want a mutable handle.
"""

from rewind.history import (
    EMPTY,
    Command,
    History,
    Redo,
    Replace,
    Reset,
    Set,
    Undo,
    can_redo,
    can_undo,
    reduce,
    redo,
    replace_present,
    reset,
    set_present,
    undo,
)
from rewind.store import HistoryStore

__all__ = [
    "EMPTY",
    "Command",
    "History",
    "HistoryStore",
    "Redo",
    "Replace",
    "Reset",
    "Set",
    "Undo",
    "can_redo",
    "can_undo",
    "reduce",
    "redo",
    "replace_present",
    "reset",
    "set_present",
    "undo",
]
