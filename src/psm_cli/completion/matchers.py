# psm_cli/completion/matchers.py
"""
Matchers form the grammar graph used for command completion.

Each node knows how to complete a partial word at its position (``match``),
whether a finished word is valid there (``accept``), and which nodes follow
it (``next``). Continuation lists are shared by reference, so the graph is a
DAG rather than a tree: several alternatives can converge on one
continuation, e.g.::

               /-- session ----\\
    object ---- subscriber ------ <aid>
               \\-- group ------/

"session", "subscriber" and "group" are the members of an
:class:`Alternatives`, "<aid>" is its (shared) ``next``.
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import List, NamedTuple, Optional, Tuple, Union

from rich.markup import escape

from psm_cli.ui import colors

INDENT = "    "


class Word(NamedTuple):
    """A completion candidate."""
    value: str
    placeholder: bool = False


class Matcher(ABC):
    """Base class for the nodes of the completion graph."""

    next: List["Matcher"]

    @abstractmethod
    def match(self, word: str) -> List[Word]:
        """Return the candidates completing the partial *word*."""

    @abstractmethod
    def accept(self, word: str) -> Tuple[bool, List["Matcher"]]:
        """Return whether *word* is valid here, and what may follow it."""

    @abstractmethod
    def label(self, styled: bool = False) -> str:
        """Return the display label used by :meth:`help`."""

    def add_next(self, matcher: "Matcher") -> None:
        self.next.append(matcher)

    def help(self, styled: bool = False) -> List[str]:
        """Render this node and everything reachable from it."""
        return _render(self.label(styled), self.next, styled)


class Literal(Matcher):
    """Matches any prefix of *value*, even the empty string."""

    def __init__(self, value: str, next: Optional[List[Matcher]] = None):
        self.value = value
        self.next = next if next is not None else []

    def match(self, word: str) -> List[Word]:
        if self.value.startswith(word):
            return [Word(self.value, False)]
        return []

    def accept(self, word: str) -> Tuple[bool, List[Matcher]]:
        if word == self.value:
            return True, self.next
        return False, []

    def label(self, styled: bool = False) -> str:
        return escape(self.value) if styled else self.value

    def __repr__(self) -> str:
        return f"Literal({self.value!r})"


class Pattern(Matcher):
    """
    Matches any word that *exp* matches in full.

    The empty word completes to a placeholder, ``<name>`` for required and
    ``[name]`` for optional parameters.
    """

    def __init__(
        self,
        exp: Union[str, re.Pattern],
        placeholder: str,
        optional: bool = False,
        next: Optional[List[Matcher]] = None,
    ):
        self.exp = re.compile(exp) if isinstance(exp, str) else exp
        self.placeholder = placeholder
        self.optional = optional
        self.next = next if next is not None else []

    def _bracketed(self, name: str) -> str:
        if self.optional:
            return f"[{name}]"
        return f"<{name}>"

    def match(self, word: str) -> List[Word]:
        if word == "":
            return [Word(self._bracketed(self.placeholder), True)]
        if self.exp.fullmatch(word):
            return [Word(word, False)]
        return []

    def accept(self, word: str) -> Tuple[bool, List[Matcher]]:
        if self.exp.fullmatch(word):
            return True, self.next
        return False, []

    def label(self, styled: bool = False) -> str:
        if not styled:
            return self._bracketed(self.placeholder)
        color = colors.PLACEHOLDER_OPTIONAL if self.optional else colors.PLACEHOLDER_REQUIRED
        name = f"[{color}]{escape(self.placeholder)}[/{color}]"
        if self.optional:
            return f"[{name}]"
        return f"<{name}>"

    def __repr__(self) -> str:
        return f"Pattern({self.exp.pattern!r}, {self._bracketed(self.placeholder)!r})"


class Alternatives(Matcher):
    """
    Mutually exclusive choices that all result in the same continuation.

    The members share this node's ``next`` list object, so anything added
    with :meth:`add_next` is reachable through every member.
    """

    def __init__(self, matchers: List[Matcher], next: Optional[List[Matcher]] = None):
        self.matchers = list(matchers)
        self.next = next if next is not None else []
        for m in self.matchers:
            m.next = self.next

    def match(self, word: str) -> List[Word]:
        return aggregate_match(self.matchers, word)

    def accept(self, word: str) -> Tuple[bool, List[Matcher]]:
        # Continuations of every accepting member are concatenated as-is.
        return aggregate_accept(self.matchers, word)

    def label(self, styled: bool = False) -> str:
        return "|".join(m.label(styled) for m in self.matchers)

    def __repr__(self) -> str:
        return f"Alternatives({self.matchers!r})"


def aggregate_match(matchers: List[Matcher], word: str) -> List[Word]:
    res: List[Word] = []
    for m in matchers:
        res.extend(m.match(word))
    return res


def aggregate_accept(matchers: List[Matcher], word: str) -> Tuple[bool, List[Matcher]]:
    ok = False
    res: List[Matcher] = []
    for m in matchers:
        accepted, continuations = m.accept(word)
        if accepted:
            ok = True
            res.extend(continuations)
    return ok, res


def indent(lines: List[str]) -> List[str]:
    return [INDENT + line for line in lines]


def _render(label: str, continuations: List[Matcher], styled: bool) -> List[str]:
    child_lines: List[str] = []
    for n in continuations:
        child_lines.extend(n.help(styled))

    if len(child_lines) == 1:
        return [f"{label} {child_lines[0]}"]
    return [label] + indent(child_lines)
