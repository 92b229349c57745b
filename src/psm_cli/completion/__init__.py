# psm_cli/completion/__init__.py
"""Command-line completion: matcher graph, builder and completers."""
from .builder import import_services
from .completer import Completer, CompletionState, TabCompleter
from .matchers import Alternatives, Literal, Matcher, Pattern, Word

__all__ = [
    "Alternatives",
    "Completer",
    "CompletionState",
    "Literal",
    "Matcher",
    "Pattern",
    "TabCompleter",
    "Word",
    "import_services",
]
