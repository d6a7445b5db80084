"""Tests for label selection transitions."""

from app.labels.selection import clear, is_full, parse_selection, remove, to_query, toggle


class TestParseSelection:
    """Tests for reading the ids parameter."""

    def test_none(self):
        assert parse_selection(None) == ()

    def test_comma_separated_keeps_order(self):
        assert parse_selection("c,a,b") == ("c", "a", "b")

    def test_repeats_and_blanks_dropped(self):
        assert parse_selection(" a, ,b,a ,") == ("a", "b")

    def test_list_form(self):
        assert parse_selection(["a,b", "c"]) == ("a", "b", "c")

    def test_capped_at_eight(self):
        raw = ",".join(f"e{i}" for i in range(12))
        assert parse_selection(raw) == tuple(f"e{i}" for i in range(8))


class TestToggle:
    """Tests for adding and removing employees."""

    def test_adds_at_end(self):
        assert toggle(("a",), "b") == ("a", "b")

    def test_removes_existing(self):
        assert toggle(("a", "b", "c"), "b") == ("a", "c")

    def test_full_selection_unchanged(self):
        full = tuple(f"e{i}" for i in range(8))
        assert is_full(full)
        assert toggle(full, "new") == full

    def test_full_selection_can_still_remove(self):
        full = tuple(f"e{i}" for i in range(8))
        assert toggle(full, "e3") == tuple(f"e{i}" for i in range(8) if i != 3)

    def test_input_not_mutated(self):
        original = ("a",)
        toggle(original, "b")
        assert original == ("a",)


def test_remove_and_clear():
    assert remove(("a", "b"), "a") == ("b",)
    assert remove(("a",), "missing") == ("a",)
    assert clear(("a", "b")) == ()


def test_to_query_round_trips_through_parse():
    selection = ("x", "y")
    assert parse_selection(to_query(selection)) == selection
