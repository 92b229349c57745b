# psm_cli/completion/completer.py
"""
Line completion on top of a matcher graph.

* :class:`Completer` - the stateless lookup: which words may go where the
  cursor is.
* :class:`TabCompleter` - the per-session tab-cycling controller that turns
  key presses into edits of the line being typed.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from rich.console import Console

from psm_cli.completion.matchers import Matcher, Word, aggregate_accept, aggregate_match

logger = logging.getLogger(__name__)

TAB = "\t"


class Completer:
    """Provides line completion based on an aggregation of root Matchers."""

    def __init__(self, *matchers: Matcher):
        self.matchers: List[Matcher] = list(matchers)

    def complete(self, line: str, pos: int) -> Tuple[str, List[Word], str]:
        """
        Return ``(head, words, tail)`` for the word under *pos*.

        *head* is the already matched part of the line (ending in a space),
        *words* the candidates for the last partial word and *tail* the text
        after the cursor.
        """
        line, tail = line[:pos], line[pos:]

        words = line.split(" ")
        if len(words) == 1:
            return "", aggregate_match(self.matchers, words[0]), tail

        matchers = self.matchers
        for word in words[:-1]:
            _, matchers = aggregate_accept(matchers, word)
            if not matchers:
                break

        head = " ".join(words[:-1]) + " "
        return head, aggregate_match(matchers, words[-1]), tail

    def help_lines(self, styled: bool = False) -> List[str]:
        lines: List[str] = []
        for m in self.matchers:
            lines.extend(m.help(styled))
        return lines

    def print_help(self, console: Console, styled: bool = True) -> None:
        """Print the command tree of every root matcher to *console*."""
        for line in self.help_lines(styled):
            console.print(line, markup=styled, highlight=False)


@dataclass
class CompletionState:
    """Mutable tab-completion state of one interactive session."""
    tabs_pressed: int = 0
    search_pos: int = 0
    in_placeholder: bool = False

    def reset(self) -> None:
        self.tabs_pressed = 0
        self.in_placeholder = False


class TabCompleter:
    """
    Tab-cycling controller.

    :meth:`complete` is called for every key press with the current line and
    cursor position and returns ``(line, pos, handled)``. When *handled* is
    false the terminal should apply its default behaviour for the key.
    """

    def __init__(self, *matchers: Matcher):
        self.completer = Completer(*matchers)
        self.state = CompletionState()

    def complete(self, line: str, pos: int, key: str) -> Tuple[str, int, bool]:
        state = self.state

        if key != TAB:
            state.tabs_pressed = 0
            if state.in_placeholder:
                # Typing over a placeholder produced by tab completion: drop
                # the rest of the line and keep the key just pressed.
                state.in_placeholder = False
                return line[:pos] + key, pos + 1, True
            return line, pos, False

        if state.tabs_pressed == 0:
            # first tab press after typing characters
            state.search_pos = pos
        elif pos < state.search_pos or (pos == state.search_pos and not state.in_placeholder):
            # cursor moved left since the last tab; start a fresh search.
            # An inserted placeholder leaves the cursor exactly at the anchor.
            state.reset()
            state.search_pos = pos
        else:
            # the line reflects an earlier completion; rewind to the search
            pos = state.search_pos

        head, words, _ = self.completer.complete(line, state.search_pos)
        if not words:
            logger.debug("No completion for %r at %d", line, state.search_pos)
            return line, pos, False

        if len(words) == 1 and not words[0].placeholder:
            state.reset()
            line = head + words[0].value + " "
            return line, len(line), True

        words = sorted(words, key=lambda w: w.value)
        word = words[state.tabs_pressed % len(words)]
        if word.placeholder:
            state.in_placeholder = True
            pos = len(head)
        else:
            state.in_placeholder = False
            pos = len(head) + len(word.value)
        state.tabs_pressed += 1
        return head + word.value, pos, True
