"""Input sources for colextract.

Opens every named file up front, so a missing or unreadable file is reported before any output is written, then
yields lines from each source in the order given.  The filename ``-`` stands for standard input.

Accepts the stdin stream via constructor so that tests can substitute their own.
"""

import logging
import sys
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, TextIO, Tuple

from colextract.exceptions import SourceReadError

STDIN_NAME = "-"


class InputSources:
    """Read lines from several files, one after the other.

    Args:
        filenames: Files to read; empty means standard input only
        stdin: Stream used for ``-`` (defaults to ``sys.stdin``)
    """

    def __init__(self, filenames: Sequence[str], stdin: Optional[TextIO] = None):
        self.filenames = list(filenames) or [STDIN_NAME]
        self.stdin = stdin if stdin is not None else sys.stdin
        self._handles: List[Tuple[str, TextIO]] = []
        self._stdin_prepared = False

    # --------------------------------------------------------------------- #
    # Public API
    # --------------------------------------------------------------------- #

    def open(self) -> None:
        """Open every source, failing on the first one that cannot be opened."""
        try:
            for filename in self.filenames:
                self._handles.append((filename, self._open_one(filename)))
        except SourceReadError:
            self.close()
            raise

    def close(self) -> None:
        """Close every opened file; standard input is left open."""
        for _name, handle in self._handles:
            if handle is not self.stdin:
                handle.close()
        self._handles = []

    def __enter__(self) -> "InputSources":
        self.open()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def lines(self) -> Iterator[str]:
        """Yield every line of every source, without line terminators.

        Raises:
            SourceReadError: If a source cannot be read or decoded
        """
        for name, handle in self._handles:
            line_count = 0
            try:
                for raw_line in handle:
                    line_count += 1
                    yield _strip_terminator(raw_line)
            except (OSError, UnicodeDecodeError) as e:
                raise SourceReadError(_display_name(name), f"read failed: {e}") from e
            logging.debug(f"Read {line_count} lines from {_display_name(name)}")

    # --------------------------------------------------------------------- #
    # Helpers
    # --------------------------------------------------------------------- #

    def _open_one(self, filename: str) -> TextIO:
        if filename == STDIN_NAME:
            logging.info("Reading from standard input")
            return self._prepare_stdin()

        path = Path(filename)
        if path.is_dir():
            raise SourceReadError(filename, "is a directory")
        try:
            handle = path.open(encoding="utf-8", newline="\n")
        except OSError as e:
            raise SourceReadError(filename, e.strerror or str(e)) from e
        logging.info(f"Reading from {filename}")
        return handle

    def _prepare_stdin(self) -> TextIO:
        # Lines end at "\n" only; a lone "\r" belongs to the line
        if not self._stdin_prepared and hasattr(self.stdin, "reconfigure"):
            self.stdin.reconfigure(newline="\n")
        self._stdin_prepared = True
        return self.stdin


def _strip_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def _display_name(name: str) -> str:
    return "standard input" if name == STDIN_NAME else name
