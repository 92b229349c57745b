# psm_cli/completion/prompt.py
"""
prompt_toolkit glue for the completion engine.

Two styles are offered:

* ``cycle`` - :func:`tab_key_bindings` routes Tab and printable keys through
  a :class:`~psm_cli.completion.completer.TabCompleter`, so repeated tabs
  cycle through candidates in place and placeholders are overwritten by
  typing.
* ``menu`` - :class:`MatcherCompleter` feeds prompt_toolkit's own
  completion menu.
"""
from __future__ import annotations

from typing import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys

from psm_cli.completion.completer import TAB, Completer as LineCompleter, TabCompleter


def _apply(event, tab_completer: TabCompleter, key: str) -> bool:
    buffer = event.current_buffer
    line, pos, handled = tab_completer.complete(buffer.text, buffer.cursor_position, key)
    if handled:
        buffer.document = Document(line, pos)
    return handled


def tab_key_bindings(tab_completer: TabCompleter) -> KeyBindings:
    """Key bindings feeding every tab and printable key to *tab_completer*."""
    kb = KeyBindings()

    @kb.add("tab")
    def _(event) -> None:
        _apply(event, tab_completer, TAB)

    @kb.add(Keys.Any)
    def _(event) -> None:
        if not _apply(event, tab_completer, event.data):
            event.current_buffer.insert_text(event.data)

    return kb


class MatcherCompleter(Completer):
    """Completion menu entries for the word under the cursor."""

    def __init__(self, completer: LineCompleter):
        self.completer = completer

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        head, words, _ = self.completer.complete(document.text, document.cursor_position)
        partial = document.text_before_cursor[len(head):]

        for word in sorted(words, key=lambda w: w.value):
            if word.placeholder:
                # shown for guidance only, selecting it inserts nothing
                yield Completion("", display=word.value, display_meta="argument")
                continue
            yield Completion(
                word.value,
                start_position=-len(partial),
                style="fg:goldenrod",
            )
