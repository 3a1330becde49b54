"""
Two-column comparison chart for tstat.

Plots every non-missing value of columns 0 and 1 against its row
number, with a dashed line at each column's arithmetic mean.  For a
paired test each complete row is joined by a thin connector so the
per-row difference is visible.  The computed t-statistic is shown in
the title.
"""

import math
from typing import Optional

import numpy as np
from matplotlib.figure import Figure

from .constants import CHART_PALETTE, COL_FIRST, COL_SECOND
from .data_file import DataFile
from .data_model import TestType


def _column_points(data: DataFile, col: int):
    """Row numbers (1-based) and values of the non-missing cells."""
    rows, values = [], []
    for row in range(data.row_count()):
        value = data.item(row, col)
        if math.isnan(value):
            continue
        rows.append(row + 1)
        values.append(value)
    return np.array(rows), np.array(values)


def render_columns(
    fig: Figure,
    data: DataFile,
    *,
    test_type: TestType = TestType.UNPAIRED,
    t: Optional[float] = None,
) -> None:
    """Render columns 0 and 1 of *data* on *fig*.

    Parameters
    ----------
    fig : matplotlib.figure.Figure
        Figure to draw on (will be cleared).
    data : DataFile
        Data with at least two columns.
    test_type : TestType
        ``PAIRED`` adds connectors between the two values of each row.
    t : float or None
        If not None, the statistic is appended to the title.
    """
    fig.clf()
    pal = CHART_PALETTE
    ax = fig.add_subplot(111)

    rows1, values1 = _column_points(data, COL_FIRST)
    rows2, values2 = _column_points(data, COL_SECOND)

    if not values1.size and not values2.size:
        ax.text(0.5, 0.5, 'No valid data points',
                transform=ax.transAxes, ha='center', va='center')
        return

    # ── Pair connectors ──────────────────────────────────────────────
    if test_type is TestType.PAIRED:
        for row in range(data.row_count()):
            a = data.item(row, COL_FIRST)
            b = data.item(row, COL_SECOND)
            if math.isnan(a) or math.isnan(b):
                continue
            ax.plot(
                [row + 1, row + 1], [a, b],
                color=pal['pair_link'], linewidth=0.8, zorder=1,
            )

    # ── Observations ─────────────────────────────────────────────────
    ax.scatter(
        rows1, values1, c=pal['first'], s=22, zorder=3,
        edgecolors='white', linewidths=0.4, label=f'Column {COL_FIRST}',
    )
    ax.scatter(
        rows2, values2, c=pal['second'], s=22, zorder=3, marker='s',
        edgecolors='white', linewidths=0.4, label=f'Column {COL_SECOND}',
    )

    # ── Mean lines ───────────────────────────────────────────────────
    if values1.size:
        ax.axhline(
            data.column_mean(COL_FIRST), color=pal['first_mean'],
            linestyle='--', linewidth=1.0, zorder=2,
            label=f'Mean {COL_FIRST}',
        )
    if values2.size:
        ax.axhline(
            data.column_mean(COL_SECOND), color=pal['second_mean'],
            linestyle='--', linewidth=1.0, zorder=2,
            label=f'Mean {COL_SECOND}',
        )

    # ── Labels ───────────────────────────────────────────────────────
    ax.set_xlabel("Row", fontsize=8, color=pal['text'])
    ax.set_ylabel("Value", fontsize=8, color=pal['text'])
    title = f"{test_type.value.capitalize()} t-test"
    if t is not None:
        title += f" (t = {t:0.6f})"
    ax.set_title(title, fontsize=10, fontweight='bold', color=pal['text'])
    ax.grid(linewidth=0.4, alpha=0.5, color=pal['grid'])
    ax.legend(loc='best', fontsize=6.5, framealpha=0.9)

    fig.tight_layout(pad=1.5)
