# test_errors.py

import pytest
from unittest.mock import Mock

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from consoleprinter.errors import ConsoleError, fail_with, plain_text
from consoleprinter.display import Renderer
from consoleprinter.document import (
    EMPTY, vertical, nest, format_error, format_static
)


class TestFailWith:
    """Render-then-exit at the program boundary."""

    def test_renders_then_exits_nonzero(self, capsys):
        """The full document is written before the exit."""
        doc = vertical([format_error("Bad input"), nest(2, format_static("hint"))])
        with pytest.raises(SystemExit) as exc_info:
            fail_with(doc, renderer=Renderer(use_color=False))
        assert exc_info.value.code == 1
        assert capsys.readouterr().out == "Bad input\n  hint\n"

    def test_custom_status(self, capsys):
        """A different failure status can be requested."""
        with pytest.raises(SystemExit) as exc_info:
            fail_with(format_error("x"), status=3)
        assert exc_info.value.code == 3
        capsys.readouterr()

    def test_nothing_written_after_exit(self):
        """Rendering happens once and the exit follows immediately."""
        renderer = Mock()
        with pytest.raises(SystemExit):
            fail_with(format_error("x"), renderer=renderer)
        renderer.render.assert_called_once()


class TestConsoleError:
    """Errors carrying their own document."""

    def test_from_message(self):
        """A message becomes an error-tagged line."""
        error = ConsoleError.from_message("Invalid command: foo")
        assert error.doc == format_error("Invalid command: foo")
        assert str(error) == "Invalid command: foo"

    def test_message_defaults_to_document_text(self):
        """Without a message, the plain text of the document is used."""
        error = ConsoleError(format_error("a") & format_static("b"))
        assert str(error) == "a b"

    def test_plain_text_flattens_lines(self):
        """Line breaks become spaces and collapsed newlines vanish."""
        doc = vertical([format_static("one"), EMPTY, nest(4, format_static("two"))])
        assert plain_text(doc) == "one two"
