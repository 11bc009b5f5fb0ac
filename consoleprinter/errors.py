# errors.py

import sys
from typing import NoReturn, Optional

from .document import Document, Text, Concat, Newline, Nest, Empty, format_error
from .display.renderer import Renderer


class ConsoleError(Exception):
    """
    A fatal usage error carrying the document to show the user.

    Raised wherever the problem is found and left to propagate; only the
    program entry point renders it and terminates.
    """

    def __init__(self, doc: Document, message: Optional[str] = None):
        self.doc = doc
        super().__init__(message if message is not None else plain_text(doc))

    @classmethod
    def from_message(cls, message: str) -> "ConsoleError":
        return cls(format_error(message), message)


def plain_text(doc: Document) -> str:
    """Flatten a document to unstyled text, for log records."""
    parts = []
    pending = [doc]
    while pending:
        node = pending.pop()
        if isinstance(node, Concat):
            pending.extend((node.right, node.left))
        elif isinstance(node, Newline):
            if not isinstance(node.inner, Empty):
                parts.append(" ")
                pending.append(node.inner)
        elif isinstance(node, Nest):
            pending.append(node.inner)
        elif isinstance(node, Text):
            parts.append(node.format.content)
    return "".join(parts)


def fail_with(doc: Document, status: int = 1,
              renderer: Optional[Renderer] = None) -> NoReturn:
    """Render ``doc`` as an error report, then exit with ``status``."""
    (renderer or Renderer()).render(doc)
    sys.exit(status)
