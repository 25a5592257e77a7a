"""
Column extraction runner for colextract

Ties the pieces together: resolves column specifiers, opens the input sources and writes one output line per input
line.
"""

import logging
import sys
from typing import Optional, Sequence, TextIO

from colextract.column_spec import format_column_spec, separate_args
from colextract.config import Settings
from colextract.exceptions import ExitCode
from colextract.line_extractor import ExtractionRequest, build_request, extract_line
from colextract.sources import InputSources


class ColumnExtractorRunner:
    """Main class for running a column extraction over all inputs"""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.lines_written = 0

    def prepare(self, columns_then_files: Sequence[str], settings: Settings) -> tuple[ExtractionRequest, list[str]]:
        """Build the extraction request and the list of files to read

        Args:
            columns_then_files: Positional tokens, leading column specifiers followed by filenames
            settings: Layered delimiter/separator settings

        Returns:
            Tuple of (extraction_request, filenames)
        """
        specs, filenames = separate_args(columns_then_files)
        request = build_request(specs, settings.delimiter, settings.separator)

        logging.info(f"Columns: {' '.join(format_column_spec(spec) for spec in specs)}")
        logging.info(f"Delimiter: {settings.delimiter!r}, separator: {request.separator!r}")
        return request, filenames

    def process(self, request: ExtractionRequest, sources: InputSources) -> None:
        """Extract columns from every line of *sources* and write them out"""
        for line in sources.lines():
            self.stdout.write(extract_line(line, request))
            self.stdout.write("\n")
            self.lines_written += 1

    def run(self, columns_then_files: Sequence[str], settings: Settings) -> int:
        """Main entry point for running an extraction

        Args:
            columns_then_files: Positional tokens, leading column specifiers followed by filenames
            settings: Layered delimiter/separator settings

        Returns:
            Exit code (0 for success)

        Raises:
            CliError: On a malformed specifier, bad delimiter or unreadable input
        """
        request, filenames = self.prepare(columns_then_files, settings)

        with InputSources(filenames, stdin=self.stdin) as sources:
            self.process(request, sources)

        logging.debug(f"Wrote {self.lines_written} lines")
        return ExitCode.OK
