"""
Text rendering for tstat.

Formats the loaded grid, the computed statistic and the optional
descriptive summary as plain text lines for the command line.  Present
cells are written to 3 decimal places; missing cells are written as a
blank of the same width so columns stay aligned.
"""

import math
from typing import List, Sequence

from .constants import (
    CELL_FORMAT, COL_FIRST, COL_SECOND, MISSING_CELL_TEXT, STATISTIC_FORMAT,
)
from .data_file import DataFile, OutOfRangeError
from .data_model import ColumnSummary


def format_cell(value: float) -> str:
    if math.isnan(value):
        return MISSING_CELL_TEXT
    return CELL_FORMAT.format(value)


def _cell_text(data: DataFile, row: int, col: int) -> str:
    try:
        return format_cell(data.item(row, col))
    except OutOfRangeError:
        # Short row: nothing stored past its end
        return MISSING_CELL_TEXT


def format_data_file(data: DataFile) -> List[str]:
    """One line of text per row of *data*, over the nominal column count.

    Cells past the end of a row shorter than row 0 are written blank.
    """
    lines = []
    for row in range(data.row_count()):
        lines.append("".join(
            _cell_text(data, row, col)
            for col in range(data.column_count())
        ))
    return lines


def format_statistic(t: float) -> str:
    return STATISTIC_FORMAT.format(t)


def summarise_columns(
    data: DataFile,
    columns: Sequence[int] = (COL_FIRST, COL_SECOND),
) -> List[ColumnSummary]:
    """Build a ``ColumnSummary`` for each of *columns*."""
    return [
        ColumnSummary(
            column=col,
            count=data.column_item_count(col),
            total=data.column_sum(col),
            mean=data.column_mean(col),
        )
        for col in columns
    ]


def format_summary(summaries: Sequence[ColumnSummary]) -> List[str]:
    """Tabulate count, sum and mean, one column of output per data column."""
    def row(label, cells):
        return f"{label:<6}" + "".join(f"{c:>14}" for c in cells)

    return [
        row("", [f"column {s.column}" for s in summaries]),
        row("n", [str(s.count) for s in summaries]),
        row("sum", [f"{s.total:0.3f}" for s in summaries]),
        row("mean", [f"{s.mean:0.3f}" for s in summaries]),
    ]
