# display/renderer.py

from typing import List, Optional, Tuple

from ..document import Document, Empty, Concat, Newline, Nest, Text
from ..formats import Format
from ..logger import Logger
from .style import StyleDefinitions
from .terminal import DisplayTerminal


class Renderer:
    """
    Writes a document to the terminal in a single left-to-right pass.

    Two values are tracked while walking the tree: the column reached on the
    current line, and the baseline new lines start at. The column runs
    through the whole walk. The baseline travels with each pending node, so
    the indentation a ``Nest`` adds is seen only by the nodes inside it.
    """

    def __init__(self, terminal: Optional[DisplayTerminal] = None,
                 definitions: Optional[StyleDefinitions] = None,
                 logger: Optional[Logger] = None,
                 use_color: bool = True):
        self.terminal = terminal or DisplayTerminal()
        self.definitions = definitions or StyleDefinitions()
        self.logger = logger or Logger(__name__)
        self.use_color = use_color

    def render(self, doc: Document) -> int:
        """
        Render ``doc`` followed by one line break and flush.

        Returns the column the document ended on, before the final break.
        """
        column = self._walk(doc)
        self.terminal.write_line()
        self.terminal.flush()
        self.logger.debug(f"Rendered document ending at column {column}")
        return column

    def _walk(self, doc: Document, column: int = 0, baseline: int = 0) -> int:
        # Explicit stack: long vertical listings nest one level per line
        pending: List[Tuple[Document, int]] = [(doc, baseline)]
        while pending:
            node, baseline = pending.pop()
            if isinstance(node, Empty):
                continue
            elif isinstance(node, Concat):
                pending.append((node.right, baseline))
                pending.append((node.left, baseline))
            elif isinstance(node, Newline):
                if isinstance(node.inner, Empty):
                    continue
                self.terminal.write_line()
                self.terminal.spaces(baseline)
                column = baseline
                pending.append((node.inner, baseline))
            elif isinstance(node, Nest):
                self.terminal.spaces(node.amount)
                column += node.amount
                pending.append((node.inner, baseline + node.amount))
            elif isinstance(node, Text):
                column += self._write_format(node.format)
            else:
                raise TypeError(f"Unknown document node: {type(node).__name__}")
        return column

    def _write_format(self, fmt: Format) -> int:
        """Write one leaf bracketed by its style and a reset."""
        if self.use_color:
            self.terminal.write(self.definitions.get_format(fmt))
            self.terminal.write(fmt.content)
            self.terminal.write(self.definitions.RESET)
        else:
            self.terminal.write(fmt.content)
        return len(fmt)


def render(doc: Document) -> int:
    """Render with a default renderer."""
    return Renderer().render(doc)
