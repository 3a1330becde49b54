"""
In-memory data file for tstat.

``DataFile`` holds a row-major grid of ``float64`` values loaded from a
delimited text source.  Empty and unparseable cells are stored as
``NaN`` and are excluded from every aggregate: item counts, power sums
and power means over an inclusive rectangle ``[r1, r2] x [c1, c2]``.

Shape rules
-----------
- The row count is the number of lines read (trailing blank lines are
  not rows).
- The column count is the length of row 0.  Later rows are stored as
  read and are not checked against it; a range that runs past the end
  of a short row raises ``OutOfRangeError``.
- Reading any cell outside ``[0, row_count) x [0, column_count)``
  raises ``OutOfRangeError``.

Empty ranges aggregate to a count of 0, a sum of 0.0 and a mean of
``NaN``.  All arithmetic is IEEE ``float64`` with numpy's floating-point
errors silenced, so a zero denominator produces ``NaN``/``inf`` rather
than an exception.
"""

import io
import os
import warnings
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from .constants import DEFAULT_DELIMITER
from .csv_parser import CellParser, default_parser, parse_text

Source = Union[str, "os.PathLike[str]", io.TextIOBase]


class OutOfRangeError(IndexError):
    """A row or column index lies outside the data file's shape."""


class DataFile:
    """A grid of floating-point values with missing-value support.

    Parameters
    ----------
    source : str, path-like, text stream or None
        Where to load the data from.  When ``None`` the data file starts
        empty and can be loaded later with ``reload``.
    parser : callable
        ``str -> float`` cell parser.  It should raise ``ValueError`` for
        a cell it cannot parse; such cells are stored as ``NaN``.
    delimiter : str
        Single field-separator character.
    """

    def __init__(
        self,
        source: Optional[Source] = None,
        *,
        parser: CellParser = default_parser,
        delimiter: str = DEFAULT_DELIMITER,
    ):
        self._source = source
        self._parser = parser
        self._delimiter = delimiter
        self._rows: List[np.ndarray] = []
        if source is not None:
            self.reload()

    # ── Construction helpers ─────────────────────────────────────────

    @classmethod
    def from_text(cls, text: str, **kwargs) -> "DataFile":
        """Load a data file from a string of delimited text."""
        return cls(io.StringIO(text), **kwargs)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Optional[float]]]) -> "DataFile":
        """Build a data file directly from row values.

        ``None`` and ``NaN`` both become missing cells.
        """
        data_file = cls()
        data_file._rows = [np.asarray(row, dtype=np.float64) for row in rows]
        return data_file

    @property
    def path(self) -> Optional[str]:
        """Path of the file the data was loaded from, if any."""
        if isinstance(self._source, (str, os.PathLike)):
            return os.fspath(self._source)
        return None

    # ── Loading ──────────────────────────────────────────────────────

    def reload(self, source: Optional[Source] = None) -> bool:
        """(Re)load all rows, replacing the current content.

        Parameters
        ----------
        source : str, path-like, text stream or None
            New source to load from.  Defaults to the source the data
            file was created with.

        Returns
        -------
        bool
            ``True`` on success.  On failure (no source, file missing or
            unreadable) a warning is issued, ``False`` is returned and
            the data file is left empty.
        """
        if source is not None:
            self._source = source
        self._rows = []

        if self._source is None or (
            isinstance(self._source, str) and not self._source.strip()
        ):
            warnings.warn("No data file to load.", stacklevel=2)
            return False

        source_name = self._source_name()
        try:
            text = self._read_source()
        except (OSError, UnicodeDecodeError) as exc:
            warnings.warn(
                f"Could not read data file '{source_name}': {exc}",
                stacklevel=2,
            )
            return False

        self._rows = parse_text(
            text,
            parser=self._parser,
            delimiter=self._delimiter,
            source_name=source_name,
        )
        return True

    def _source_name(self) -> str:
        path = self.path
        if path is not None:
            return os.path.basename(path) or path
        return getattr(self._source, 'name', '<stream>')

    def _read_source(self) -> str:
        if isinstance(self._source, (str, os.PathLike)):
            with open(self._source, 'r', encoding='utf-8-sig') as fh:
                return fh.read()
        return self._source.read()

    # ── Shape ────────────────────────────────────────────────────────

    def row_count(self) -> int:
        return len(self._rows)

    def column_count(self) -> int:
        """Length of the first row, or 0 for an empty data file."""
        if self._rows:
            return len(self._rows[0])
        return 0

    def is_empty(self) -> bool:
        return self.row_count() == 0

    # ── Cell access ──────────────────────────────────────────────────

    def _check_row(self, row: int) -> None:
        if row < 0 or row >= self.row_count():
            raise OutOfRangeError(
                f"row {row} out of range for {self.row_count()} rows"
            )

    def _check_column(self, col: int) -> None:
        if col < 0 or col >= self.column_count():
            raise OutOfRangeError(
                f"column {col} out of range for {self.column_count()} columns"
            )

    def item(self, row: int, col: int) -> float:
        """Fetch one cell.  Missing cells are ``NaN``.

        Raises ``OutOfRangeError`` if *row* or *col* is outside the data
        file's shape.
        """
        self._check_row(row)
        self._check_column(col)
        cells = self._rows[row]
        if col >= len(cells):
            raise OutOfRangeError(
                f"row {row} has only {len(cells)} columns"
            )
        return float(cells[col])

    # ── Ranges ───────────────────────────────────────────────────────

    def _resolve_range(
        self,
        r1: Optional[int],
        c1: Optional[int],
        r2: Optional[int],
        c2: Optional[int],
    ) -> Tuple[int, int, int, int]:
        corners = (r1, c1, r2, c2)
        if all(c is None for c in corners):
            return 0, 0, self.row_count() - 1, self.column_count() - 1
        if any(c is None for c in corners):
            raise TypeError(
                "a range needs all four of r1, c1, r2 and c2, or none of them"
            )
        return r1, c1, r2, c2

    def _present_values(self, r1, c1, r2, c2) -> np.ndarray:
        """Non-missing cells of the range, in row-major order."""
        r1, c1, r2, c2 = self._resolve_range(r1, c1, r2, c2)
        if r1 > r2 or c1 > c2:
            return np.empty(0, dtype=np.float64)

        # Bounds-check the corners before any cell is read
        self._check_row(r1)
        self._check_row(r2)
        self._check_column(c1)
        self._check_column(c2)

        cells = []
        for r in range(r1, r2 + 1):
            row = self._rows[r]
            if len(row) <= c2:
                raise OutOfRangeError(
                    f"row {r} has only {len(row)} columns; "
                    f"range needs column {c2}"
                )
            cells.append(row[c1:c2 + 1])

        block = np.concatenate(cells)
        return block[~np.isnan(block)]

    def _power_sum(self, r1, c1, r2, c2, power):
        """Count and power sum of a range, accumulated cell by cell in
        row-major order."""
        values = self._present_values(r1, c1, r2, c2)
        total = 0.0
        with np.errstate(all='ignore'):
            for value in np.power(values, np.float64(power)).tolist():
                total += value
        return values.size, total

    def item_count(
        self,
        r1: Optional[int] = None,
        c1: Optional[int] = None,
        r2: Optional[int] = None,
        c2: Optional[int] = None,
    ) -> int:
        """Count the non-missing cells in a range.

        With no arguments the whole data file is counted.  If any corner
        is given, all four must be.
        """
        return int(self._present_values(r1, c1, r2, c2).size)

    def row_item_count(self, row: int = 0) -> int:
        return self.item_count(row, 0, row, self.column_count() - 1)

    def column_item_count(self, col: int = 0) -> int:
        return self.item_count(0, col, self.row_count() - 1, col)

    def sum(
        self,
        r1: Optional[int] = None,
        c1: Optional[int] = None,
        r2: Optional[int] = None,
        c2: Optional[int] = None,
        power: float = 1.0,
    ) -> float:
        """Sum the non-missing cells in a range, each raised to *power*.

        With no corners the whole data file is summed.  An empty range
        sums to 0.0.
        """
        return self._power_sum(r1, c1, r2, c2, power)[1]

    def row_sum(self, row: int, power: float = 1.0) -> float:
        return self.sum(row, 0, row, self.column_count() - 1, power)

    def column_sum(self, col: int, power: float = 1.0) -> float:
        return self.sum(0, col, self.row_count() - 1, col, power)

    def mean(
        self,
        r1: Optional[int] = None,
        c1: Optional[int] = None,
        r2: Optional[int] = None,
        c2: Optional[int] = None,
        mean_number: float = 1.0,
    ) -> float:
        """Power mean of the non-missing cells in a range.

        Computes ``(sum(v ** p) / n) ** (1 / p)`` with ``p`` =
        *mean_number*: 1 is the arithmetic mean, 2 the quadratic mean
        and -1 the harmonic mean.  There is no geometric-mean case.

        An empty range gives ``NaN``.
        """
        n, total = self._power_sum(r1, c1, r2, c2, mean_number)
        with np.errstate(all='ignore'):
            exponent = np.float64(1.0) / np.float64(mean_number)
            return float(np.power(np.float64(total) / np.float64(n), exponent))

    def row_mean(self, row: int, mean_number: float = 1.0) -> float:
        return self.mean(row, 0, row, self.column_count() - 1, mean_number)

    def column_mean(self, col: int, mean_number: float = 1.0) -> float:
        return self.mean(0, col, self.row_count() - 1, col, mean_number)

    def __repr__(self) -> str:
        return (
            f"DataFile(path={self.path!r}, rows={self.row_count()}, "
            f"columns={self.column_count()})"
        )
