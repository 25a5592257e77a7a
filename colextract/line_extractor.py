"""Column extraction from a single line of text.

Contains pure functions that split a line and pick columns out of it. No I/O and no argument parsing should be
included here.
"""

import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from colextract.column_spec import ColumnSpec, Range, Single
from colextract.exceptions import DelimiterError

DEFAULT_DELIMITER = r"\s+"
DEFAULT_SEPARATOR = " "


@dataclass(frozen=True)
class ExtractionRequest:
    """Everything needed to turn an input line into an output line.

    Built once per run and shared, unchanged, by every line of every input.
    """

    specs: Tuple[ColumnSpec, ...]
    delimiter: "re.Pattern[str]"
    separator: str = DEFAULT_SEPARATOR


def compile_delimiter(pattern: str) -> "re.Pattern[str]":
    """Compile the delimiter regex, reporting bad patterns as a usage error."""
    try:
        return re.compile(pattern)
    except re.error as e:
        raise DelimiterError(f"invalid delimiter regex '{pattern}': {e}") from e


def build_request(
    specs: Sequence[ColumnSpec], delimiter: str = DEFAULT_DELIMITER, separator: str = DEFAULT_SEPARATOR
) -> ExtractionRequest:
    """Build an :class:`ExtractionRequest` from parsed specifiers and raw option values."""
    return ExtractionRequest(tuple(specs), compile_delimiter(delimiter), separator)


def split_columns(line: str, delimiter: "re.Pattern[str]") -> List[str]:
    """Split *line* on *delimiter* and drop empty leading and trailing columns.

    Interior empty columns are kept, so ``"a::b"`` split on ``:`` gives three columns.

    Examples:
        >>> split_columns("  a b  ", re.compile(r"\\s+"))   # ["a", "b"]
        >>> split_columns(":a::b:", re.compile(":"))        # ["a", "", "b"]
    """
    columns = delimiter.split(line)

    start = 0
    end = len(columns)
    while start < end and columns[start] == "":
        start += 1
    while end > start and columns[end - 1] == "":
        end -= 1
    return columns[start:end]


def resolve_index(index: int, num_columns: int) -> int:
    """Translate a 1-based or negative column number into a 0-based position.

    The result is not bounds checked; 0 resolves to -1, which is never a valid position.
    """
    if index < 0:
        return num_columns + index
    return index - 1


def _range_positions(spec: Range, num_columns: int) -> Iterator[int]:
    start = resolve_index(spec.start, num_columns)
    if start < 0 or start >= num_columns:
        return
    end = min(max(resolve_index(spec.end, num_columns), 0), num_columns - 1)
    step = 1 if start <= end else -1
    yield from range(start, end + step, step)


def extract_fields(line: str, request: ExtractionRequest) -> List[str]:
    """Return the fields selected by *request* from *line*, in request order.

    Column numbers that fall outside the line are skipped without error.  A range whose start is out of bounds is
    skipped entirely, while an out of bounds end is clamped to the line, so ``3:1000`` selects every column from the
    third onwards.  Ranges with a start beyond their end are emitted in descending order.

    Args:
        line: Input line without its line terminator
        request: Specifiers, delimiter and separator for this run

    Returns:
        Selected fields; column 0 is the original line untouched
    """
    columns: Optional[List[str]] = None
    fields: List[str] = []

    for spec in request.specs:
        if isinstance(spec, Single) and spec.index == 0:
            fields.append(line)
            continue

        # Only split when a column is actually needed
        if columns is None:
            columns = split_columns(line, request.delimiter)
        num_columns = len(columns)

        if isinstance(spec, Range):
            fields.extend(columns[position] for position in _range_positions(spec, num_columns))
        else:
            position = resolve_index(spec.index, num_columns)
            if 0 <= position < num_columns:
                fields.append(columns[position])

    return fields


def extract_line(line: str, request: ExtractionRequest) -> str:
    """Extract the requested columns from *line* and join them with the separator.

    Examples:
        >>> request = build_request([Single(-1), Single(-2)])
        >>> extract_line("a b c", request)   # "c b"
    """
    return request.separator.join(extract_fields(line, request))
