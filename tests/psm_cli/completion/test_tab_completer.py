# tests/psm_cli/completion/test_tab_completer.py
import pytest

from psm_cli.completion.completer import TAB, CompletionState, TabCompleter
from psm_cli.completion.matchers import Literal, Pattern


@pytest.fixture
def completer():
    c1 = Literal("foo", next=[Literal("bar"), Literal("baz")])
    c2 = Literal(
        "goo",
        next=[
            Literal("quux"),
            Literal("flaa"),
            Pattern(r"\d+", "integer", next=[Literal("end")]),
        ],
    )
    return TabCompleter(c1, c2)


def test_key_sequence(completer):
    steps = [
        (("fo", 2, "o"), ("fo", 2, False)),
        (("fo", 2, TAB), ("foo ", 4, True)),
        # ---
        (("foo", 3, " "), ("foo", 3, False)),
        (("foo ", 4, TAB), ("foo bar", 7, True)),
        (("foo bar", 7, TAB), ("foo baz", 7, True)),
        (("foo baz", 7, TAB), ("foo bar", 7, True)),
        (("foo ", 4, TAB), ("foo bar", 7, True)),
        # ---
        (("goo", 3, " "), ("goo", 3, False)),
        (("goo ", 4, TAB), ("goo <integer>", 4, True)),
        (("goo <integer>", 4, TAB), ("goo flaa", 8, True)),
        (("goo flaa", 8, TAB), ("goo quux", 8, True)),
        (("goo quux", 8, TAB), ("goo <integer>", 4, True)),
        (("goo <integer>", 4, "1"), ("goo 1", 5, True)),
        (("goo 1", 5, "2"), ("goo 1", 5, False)),
    ]
    for (line, pos, key), expected in steps:
        assert completer.complete(line, pos, key) == expected, (line, pos, key)


def test_single_match_accepts_and_moves_on(completer):
    assert completer.complete("go", 2, TAB) == ("goo ", 4, True)
    assert completer.state == CompletionState(tabs_pressed=0, search_pos=2, in_placeholder=False)


def test_no_candidates_is_unhandled(completer):
    assert completer.complete("zzz", 3, TAB) == ("zzz", 3, False)
    assert completer.complete("foo x", 5, TAB) == ("foo x", 5, False)


def test_cycling_is_periodic(completer):
    line, pos = "foo ", 4
    seen = []
    for _ in range(5):
        line, pos, handled = completer.complete(line, pos, TAB)
        assert handled
        seen.append(line)
    assert seen == ["foo bar", "foo baz", "foo bar", "foo baz", "foo bar"]


def test_cycling_period_with_placeholder(completer):
    line, pos = "goo ", 4
    seen = []
    for _ in range(6):
        line, pos, _ = completer.complete(line, pos, TAB)
        seen.append(line)
    assert seen[:3] == ["goo <integer>", "goo flaa", "goo quux"]
    assert seen[3:] == seen[:3]


def test_placeholder_overwrite():
    tc = TabCompleter(Literal("foo", next=[Pattern(".+", "bar")]))

    line, pos, handled = tc.complete("foo ", 4, TAB)
    assert (line, pos, handled) == ("foo <bar>", 4, True)
    assert tc.state.in_placeholder

    assert tc.complete(line, pos, "x") == ("foo x", 5, True)
    assert not tc.state.in_placeholder
    assert tc.state.tabs_pressed == 0


def test_cursor_moved_left_starts_fresh_search(completer):
    completer.complete("foo ", 4, TAB)
    completer.complete("foo bar", 7, TAB)
    assert completer.state.tabs_pressed == 2

    # user moved back into the first word and pressed tab again
    assert completer.complete("foo baz", 2, TAB) == ("foo ", 4, True)
    assert completer.state.tabs_pressed == 0


def test_non_tab_key_clears_counter(completer):
    completer.complete("foo ", 4, TAB)
    assert completer.state.tabs_pressed == 1
    assert completer.complete("foo bar", 7, "x") == ("foo bar", 7, False)
    assert completer.state.tabs_pressed == 0


@pytest.fixture
def psm():
    return TabCompleter(
        Literal("object", next=[Pattern(r"\d+", "aid")]),
        Literal("system", next=[Literal("hostname")]),
    )


def test_tab_on_placeholder_keeps_it(psm):
    assert psm.complete("object ", 7, TAB) == ("object <aid>", 7, True)
    assert psm.complete("object <aid>", 7, TAB) == ("object <aid>", 7, True)
    assert psm.state.in_placeholder


def test_cursor_moved_left_from_placeholder(psm):
    psm.complete("object ", 7, TAB)
    assert psm.state.in_placeholder

    assert psm.complete("object <aid>", 3, TAB) == ("object ", 7, True)
    assert psm.state == CompletionState(tabs_pressed=0, search_pos=3, in_placeholder=False)


def test_first_tab_on_new_line_after_placeholder(psm):
    psm.complete("object ", 7, TAB)

    # the line was submitted, a new one is empty
    assert psm.complete("", 0, TAB) == ("object", 6, True)
    assert psm.complete("object", 6, TAB) == ("system", 6, True)
