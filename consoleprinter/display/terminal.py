# display/terminal.py

import sys


class DisplayTerminal:
    """Low-level writes to the terminal's standard output."""

    def write(self, text: str = "", newline: bool = False) -> None:
        """Write text to stdout; append newline if requested."""
        try:
            # Looked up per call so redirected or captured streams are honored
            sys.stdout.write(text)
            if newline:
                sys.stdout.write("\n")
        except BrokenPipeError:
            pass  # Reader went away

    def write_line(self, text: str = "") -> None:
        """Write text with newline."""
        self.write(text, newline=True)

    def spaces(self, count: int) -> None:
        """Write ``count`` literal spaces."""
        if count > 0:
            self.write(" " * count)

    def flush(self) -> None:
        try:
            sys.stdout.flush()
        except BrokenPipeError:
            pass
