"""
Data model for tstat.

Small value types shared by the calculator, the report renderer and the
command line.  ``TestType`` selects the t-test formula; ``ColumnSummary``
is an immutable snapshot of one column's descriptive aggregates, built
from a ``DataFile`` and handed to the report renderer read-only.

Missing data is modelled as ``NaN`` inside ``DataFile``; the summary
only ever carries aggregates over the non-missing cells.
"""

import enum
from dataclasses import dataclass


class TestType(enum.Enum):
    """Which t-test formula to apply to columns 0 and 1."""
    PAIRED = "paired"
    UNPAIRED = "unpaired"

    @classmethod
    def parse(cls, text: str) -> "TestType":
        """Parse a command-line test-type word, ignoring case.

        Raises ``ValueError`` for anything other than ``paired`` or
        ``unpaired``.
        """
        return cls(text.strip().lower())


@dataclass(frozen=True)
class ColumnSummary:
    """Descriptive aggregates for one column of a data file.

    Parameters
    ----------
    column : int
        0-based column index.
    count : int
        Number of non-missing cells.
    total : float
        Sum of the non-missing cells.
    mean : float
        Arithmetic mean of the non-missing cells (``NaN`` when
        ``count`` is zero).
    """
    column: int
    count: int
    total: float
    mean: float
