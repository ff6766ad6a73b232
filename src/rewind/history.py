"""
History core: past / present / future and the five transitions.

Architecture:
- History is a frozen dataclass of tuples; every transition returns a new one
- Commands are frozen dataclasses describing a transition
- reduce(history, command) is the single pure transition function
- The set_present/replace_present/reset/undo/redo helpers are what reduce
  dispatches to, and can be called directly

Timeline order is past (oldest first) + present + future (nearest first).
EMPTY marks "no present yet" and never enters past or future. Only
Reset(EMPTY) or History.initial() produce an empty present, so an empty
present always comes with an empty past and future. Set and Replace ignore
EMPTY as a new value.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar, Union

from rewind.equality import Equality, value_equal
from rewind.errors import UnknownCommandError


T = TypeVar("T")


class _Empty(Enum):
    EMPTY = "EMPTY"

    def __repr__(self) -> str:
        return "EMPTY"

    def __bool__(self) -> bool:
        return False


EMPTY = _Empty.EMPTY


# =============================================================================
# Data Types
# =============================================================================


@dataclass(frozen=True)
class History(Generic[T]):
    """Immutable snapshot of an undo/redo history."""

    past: tuple[T, ...] = ()
    present: Union[T, _Empty] = EMPTY
    future: tuple[T, ...] = ()

    @classmethod
    def initial(cls, present: Union[T, _Empty] = EMPTY) -> "History[T]":
        """A fresh history with no past and no future."""
        return cls(past=(), present=present, future=())

    @property
    def has_present(self) -> bool:
        return self.present is not EMPTY

    @property
    def can_undo(self) -> bool:
        return bool(self.past)

    @property
    def can_redo(self) -> bool:
        return bool(self.future)

    @property
    def timeline(self) -> tuple[T, ...]:
        """
        Every value reachable by undo/redo, in chronological order.

        The present sits at index len(past) when it is set.
        """
        if self.present is EMPTY:
            return self.past + self.future
        return self.past + (self.present,) + self.future


# =============================================================================
# Commands
# =============================================================================


@dataclass(frozen=True)
class Set:
    """Commit a new value as a checkpoint."""
    value: Any


@dataclass(frozen=True)
class Replace:
    """Overwrite the present without checkpointing it."""
    value: Any


@dataclass(frozen=True)
class Reset:
    """Drop all history and start over from value."""
    value: Any


@dataclass(frozen=True)
class Undo:
    """Step back to the previous checkpoint."""
    pass


@dataclass(frozen=True)
class Redo:
    """Step forward along the redo trail."""
    pass


# Command union type for type checking
Command = Union[Set, Replace, Reset, Undo, Redo]


# =============================================================================
# Transitions
# =============================================================================


def _is_same(present: Any, value: Any, equal: Equality) -> bool:
    if present is EMPTY:
        return False
    return bool(equal(present, value))


def _append(trail: tuple, value: Any) -> tuple:
    if value is EMPTY:
        return trail
    return trail + (value,)


def _prepend(value: Any, trail: tuple) -> tuple:
    if value is EMPTY:
        return trail
    return (value,) + trail


def set_present(
    history: History[T], value: T, equal: Equality = value_equal
) -> History[T]:
    """Commit value, checkpointing the old present and discarding redo."""
    if value is EMPTY:
        return history
    if _is_same(history.present, value, equal):
        return history
    return History(
        past=_append(history.past, history.present),
        present=value,
        future=(),
    )


def replace_present(
    history: History[T], value: T, equal: Equality = value_equal
) -> History[T]:
    """Overwrite the present in place; past is kept, redo is discarded."""
    if value is EMPTY:
        return history
    if _is_same(history.present, value, equal):
        return history
    return History(past=history.past, present=value, future=())


def reset(history: History[T], value: T) -> History[T]:
    """Erase past and future unconditionally."""
    return History(past=(), present=value, future=())


def undo(history: History[T]) -> History[T]:
    """Move the cursor back one checkpoint. No-op when past is empty."""
    if not history.past:
        return history
    return History(
        past=history.past[:-1],
        present=history.past[-1],
        future=_prepend(history.present, history.future),
    )


def redo(history: History[T]) -> History[T]:
    """Move the cursor forward one step. No-op when future is empty."""
    if not history.future:
        return history
    return History(
        past=_append(history.past, history.present),
        present=history.future[0],
        future=history.future[1:],
    )


def can_undo(history: History[Any]) -> bool:
    return bool(history.past)


def can_redo(history: History[Any]) -> bool:
    return bool(history.future)


# =============================================================================
# Reducer
# =============================================================================


def reduce(
    history: History[T], command: Command, equal: Equality = value_equal
) -> History[T]:
    """
    Apply a command and return the resulting history.

    The input history is never modified. Commands that change nothing
    (setting the present value again, undo with no past, redo with no
    future) return the input object itself.
    """
    match command:
        case Set(value=value):
            return set_present(history, value, equal)

        case Replace(value=value):
            return replace_present(history, value, equal)

        case Reset(value=value):
            return reset(history, value)

        case Undo():
            return undo(history)

        case Redo():
            return redo(history)

    raise UnknownCommandError(f"Unknown history command: {command!r}")
