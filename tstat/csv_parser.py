"""
CSV parser for tstat.

Turns delimited text into rows of floats for ``DataFile``.  Handles:

- Single-character delimiter splitting (no quoting or escaping)
- Blank cells (mapped to ``NaN``)
- Non-numeric cells (mapped to ``NaN`` and reported once per load)
- Trailing blank lines (ignored)
"""

import math
import warnings
from typing import Callable, Iterable, List

import numpy as np

from .constants import DEFAULT_DELIMITER, MAX_REPORTED_BAD_CELLS, MISSING_VALUE

#: A cell parser maps one field of text to a float, raising ``ValueError``
#: when the field is not a valid value.
CellParser = Callable[[str], float]


# ── Cell parsing ─────────────────────────────────────────────────────────

def default_parser(text: str) -> float:
    """Parse one CSV field as a decimal floating-point literal.

    Surrounding whitespace is ignored and a blank field is a missing
    value (``NaN``).

    Raises ``ValueError`` for anything else that is not a finite
    decimal number, including ``"inf"``, ``"nan"`` and literals with
    digit-grouping underscores that ``float()`` would otherwise accept.
    """
    s = text.strip()
    if not s:
        return MISSING_VALUE
    if '_' in s:
        raise ValueError(f"not a decimal number: {s!r}")
    result = float(s)
    if not math.isfinite(result):
        raise ValueError(f"non-finite value: {s!r}")
    return result


# ── Line splitting ───────────────────────────────────────────────────────

def split_line(line: str, delimiter: str = DEFAULT_DELIMITER) -> List[str]:
    """Split a data line at every *delimiter*.

    A line with no delimiter is a single field, so an empty line yields
    one (blank) field.
    """
    if len(delimiter) != 1:
        raise ValueError(
            f"delimiter must be a single character, got {delimiter!r}"
        )
    return line.split(delimiter)


def _strip_trailing_blank_lines(lines: List[str]) -> List[str]:
    end = len(lines)
    while end > 0 and not lines[end - 1].strip():
        end -= 1
    return lines[:end]


# ── Text parsing ─────────────────────────────────────────────────────────

def parse_rows(
    lines: Iterable[str],
    *,
    parser: CellParser = default_parser,
    delimiter: str = DEFAULT_DELIMITER,
    source_name: str = "<data>",
) -> List[np.ndarray]:
    """Parse delimited lines into a list of float rows.

    Each field is passed to *parser*.  When the parser raises
    ``ValueError`` the cell becomes ``NaN``; all such cells are
    collected and reported in a single warning.  Rows are stored as
    read, with no reconciliation of their lengths.

    Parameters
    ----------
    lines : iterable of str
        Raw lines, with or without line terminators.
    parser : callable
        ``str -> float`` cell parser.
    delimiter : str
        Single field-separator character.
    source_name : str
        Name used in the warning message.

    Returns
    -------
    list of numpy.ndarray
        One 1-D ``float64`` array per line.
    """
    raw_lines = [line.rstrip('\n\r') for line in lines]
    raw_lines = _strip_trailing_blank_lines(raw_lines)

    rows: List[np.ndarray] = []
    bad_tokens: List[str] = []

    for line_idx, raw_line in enumerate(raw_lines, start=1):
        fields = split_line(raw_line, delimiter)
        values = np.empty(len(fields), dtype=np.float64)

        for col_idx, field in enumerate(fields):
            try:
                values[col_idx] = parser(field)
            except ValueError:
                bad_tokens.append(
                    f"line {line_idx} col {col_idx + 1}: '{field.strip()}'"
                )
                values[col_idx] = MISSING_VALUE

        rows.append(values)

    if bad_tokens:
        detail = "; ".join(bad_tokens[:MAX_REPORTED_BAD_CELLS])
        if len(bad_tokens) > MAX_REPORTED_BAD_CELLS:
            detail += (
                f" ... and {len(bad_tokens) - MAX_REPORTED_BAD_CELLS} more"
            )
        warnings.warn(
            f"Non-numeric values in '{source_name}': {detail}. "
            f"These cells were treated as missing data.",
            stacklevel=3,
        )

    return rows


def parse_text(
    text: str,
    *,
    parser: CellParser = default_parser,
    delimiter: str = DEFAULT_DELIMITER,
    source_name: str = "<data>",
) -> List[np.ndarray]:
    """Parse a block of delimited text.  See ``parse_rows``."""
    return parse_rows(
        text.splitlines(),
        parser=parser,
        delimiter=delimiter,
        source_name=source_name,
    )
