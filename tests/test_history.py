"""
Transition tests for rewind.history.

Covers: Set / Replace / Reset / Undo / Redo, the derived queries,
EMPTY handling, and the reducer's command dispatch.
"""

import pytest

from rewind.equality import identity_equal
from rewind.errors import UnknownCommandError
from rewind.history import (
    EMPTY,
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


def h(past, present, future):
    return History(past=tuple(past), present=present, future=tuple(future))


class TestInitial:
    """A fresh history has nothing to undo or redo."""

    def test_initial_with_value(self):
        history = History.initial("A")
        assert history == h([], "A", [])
        assert not history.can_undo
        assert not history.can_redo
        assert history.has_present

    def test_initial_without_value_is_empty(self):
        history = History.initial()
        assert history.present is EMPTY
        assert not history.has_present
        assert history.timeline == ()

    def test_none_is_a_real_present(self):
        history = History.initial(None)
        assert history.present is None
        assert history.has_present
        assert history.timeline == (None,)


class TestSet:
    def test_set_checkpoints_present(self):
        history = set_present(h(["A"], "B", []), "C")
        assert history == h(["A", "B"], "C", [])

    def test_set_discards_redo_trail(self):
        history = set_present(h(["A"], "B", ["C", "D"]), "X")
        assert history == h(["A", "B"], "X", [])

    def test_set_same_value_returns_same_object(self):
        before = h(["A"], "B", ["C"])
        assert set_present(before, "B") is before

    def test_set_equal_but_distinct_value_is_noop_by_default(self):
        before = h([], [1, 2], [])
        assert set_present(before, [1, 2]) is before

    def test_set_equal_but_distinct_value_commits_under_identity(self):
        before = h([], [1, 2], [])
        after = set_present(before, [1, 2], identity_equal)
        assert after is not before
        assert after.past == ([1, 2],)

    def test_set_on_empty_present_creates_no_checkpoint(self):
        history = set_present(History.initial(), "A")
        assert history == h([], "A", [])

    def test_set_none_after_value(self):
        history = set_present(History.initial("A"), None)
        assert history == h(["A"], None, [])

    def test_set_empty_is_ignored(self):
        before = h(["A"], "B", ["C"])
        assert set_present(before, EMPTY) is before
        assert reduce(before, Set(EMPTY)) is before

    def test_input_history_is_untouched(self):
        before = h(["A"], "B", ["C"])
        set_present(before, "X")
        assert before == h(["A"], "B", ["C"])


class TestReplace:
    def test_replace_keeps_past(self):
        history = replace_present(h(["A"], "B", []), "C")
        assert history == h(["A"], "C", [])

    def test_replace_discards_redo_trail(self):
        history = replace_present(h(["A"], "B", ["C"]), "X")
        assert history.future == ()

    def test_replace_same_value_returns_same_object(self):
        before = h(["A"], "B", ["C"])
        assert replace_present(before, "B") is before

    def test_replace_from_initial_creates_no_past(self):
        history = replace_present(History.initial("A"), "B")
        assert history == h([], "B", [])

    def test_replace_empty_is_ignored(self):
        before = h(["A"], "B", ["C"])
        assert replace_present(before, EMPTY) is before

    def test_replace_on_empty_present(self):
        assert replace_present(History.initial(), "A") == h([], "A", [])


class TestReset:
    def test_reset_clears_everything(self):
        history = reset(h(["A", "B"], "C", ["D"]), "Z")
        assert history == h([], "Z", [])

    def test_reset_has_no_equality_shortcut(self):
        before = h(["A"], "B", ["C"])
        after = reset(before, "B")
        assert after is not before
        assert after == h([], "B", [])


class TestUndoRedo:
    def test_undo_moves_present_to_future(self):
        history = undo(h(["A", "B"], "C", ["D"]))
        assert history == h(["A"], "B", ["C", "D"])

    def test_redo_moves_present_to_past(self):
        history = redo(h(["A"], "B", ["C", "D"]))
        assert history == h(["A", "B"], "C", ["D"])

    def test_undo_with_empty_past_is_noop(self):
        before = h([], "A", ["B"])
        assert undo(before) is before

    def test_redo_with_empty_future_is_noop(self):
        before = h(["A"], "B", [])
        assert redo(before) is before

    def test_undo_from_empty_present_does_not_store_empty(self):
        history = undo(h(["A"], EMPTY, []))
        assert history == h([], "A", [])

    def test_derived_queries(self):
        history = h(["A"], "B", [])
        assert can_undo(history) and history.can_undo
        assert not can_redo(history) and not history.can_redo

        history = undo(history)
        assert not can_undo(history)
        assert can_redo(history)


class TestReduce:
    """reduce() dispatches each command to its transition."""

    @pytest.mark.parametrize(
        "command, expected",
        [
            (Set("X"), h(["A", "B"], "X", [])),
            (Replace("X"), h(["A"], "X", [])),
            (Reset("X"), h([], "X", [])),
            (Undo(), h([], "A", ["B", "C"])),
            (Redo(), h(["A", "B"], "C", [])),
        ],
    )
    def test_commands(self, command, expected):
        assert reduce(h(["A"], "B", ["C"]), command) == expected

    def test_custom_equality_is_used(self):
        before = h([], "abc", [])
        same_ignoring_case = lambda a, b: a.lower() == b.lower()
        assert reduce(before, Set("ABC"), same_ignoring_case) is before
        assert reduce(before, Replace("ABC"), same_ignoring_case) is before

    def test_ambiguous_eq_needs_identity_or_callable(self):
        class Grid:
            def __eq__(self, other):
                raise ValueError("truth value is ambiguous")

            __hash__ = object.__hash__

        first, second = Grid(), Grid()
        before = h([], first, [])

        with pytest.raises(ValueError):
            reduce(before, Set(second))

        assert reduce(before, Set(first), identity_equal) is before
        assert reduce(before, Set(second), identity_equal).past == (first,)

    def test_unknown_command_raises(self):
        with pytest.raises(UnknownCommandError):
            reduce(History.initial("A"), "undo")

    def test_commands_are_hashable_values(self):
        assert Set("A") == Set("A")
        assert Undo() == Undo()
        assert len({Set("A"), Set("A"), Redo()}) == 2


def test_history_is_frozen():
    history = History.initial("A")
    with pytest.raises(AttributeError):
        history.present = "B"


def test_timeline_orders_past_present_future():
    assert h(["A", "B"], "C", ["D", "E"]).timeline == ("A", "B", "C", "D", "E")
