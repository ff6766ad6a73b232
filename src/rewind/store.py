"""Caller-owned history controller.

HistoryStore wraps one History value and threads every command through
reduce(). It is the plain-Python counterpart of a UI hook: the owner keeps
the store, calls set/replace/reset/undo/redo, and reads can_undo/can_redo
afterwards. There is no shared or global state; independent documents get
independent stores.
"""

from __future__ import annotations

import logging
from typing import Generic, TypeVar, Union

from rewind.config import Settings
from rewind.equality import Equality, resolve_equality
from rewind.history import (
    EMPTY,
    Command,
    History,
    Redo,
    Replace,
    Reset,
    Set,
    Undo,
    _Empty,
    reduce,
)


T = TypeVar("T")

logger = logging.getLogger(__name__)


class HistoryStore(Generic[T]):
    """Holds the current History and applies commands to it.

    set/replace/reset/dispatch return the new History. undo/redo return
    whether the cursor moved, since callers mostly use them as guarded
    key handlers and read store.history afterwards.
    """

    def __init__(
        self,
        initial: Union[T, _Empty] = EMPTY,
        equality: Union[str, Equality] = "value",
    ) -> None:
        self._equal = resolve_equality(equality)
        self._history: History[T] = History.initial(initial)

    @classmethod
    def from_settings(
        cls, settings: Settings, initial: Union[T, _Empty] = EMPTY
    ) -> "HistoryStore[T]":
        return cls(initial=initial, equality=settings.equality)

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def dispatch(self, command: Command) -> History[T]:
        """Apply a command and keep the resulting history."""
        before = self._history
        after = reduce(before, command, self._equal)
        self._history = after

        if after is before:
            logger.debug("%r: no change", command)
        else:
            logger.debug(
                "%r: past=%d present=%r future=%d",
                command,
                len(after.past),
                after.present,
                len(after.future),
            )
        return after

    def set(self, value: T) -> History[T]:
        return self.dispatch(Set(value))

    def replace(self, value: T) -> History[T]:
        return self.dispatch(Replace(value))

    def reset(self, value: T) -> History[T]:
        return self.dispatch(Reset(value))

    def undo(self) -> bool:
        """Undo one step if possible. Returns whether anything moved."""
        if not self.can_undo:
            return False
        self.dispatch(Undo())
        return True

    def redo(self) -> bool:
        """Redo one step if possible. Returns whether anything moved."""
        if not self.can_redo:
            return False
        self.dispatch(Redo())
        return True

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def history(self) -> History[T]:
        return self._history

    @property
    def present(self) -> Union[T, _Empty]:
        return self._history.present

    @property
    def past(self) -> tuple[T, ...]:
        return self._history.past

    @property
    def future(self) -> tuple[T, ...]:
        return self._history.future

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    def __len__(self) -> int:
        """Number of undoable steps."""
        return len(self._history.past)

    def __repr__(self) -> str:
        return f"HistoryStore({self._history!r})"
