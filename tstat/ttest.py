"""
Student's t-statistic over the first two columns of a ``DataFile``.

``TTest`` keeps a plain reference to its data file, so any change made
to that data file by its owner (e.g. a ``reload``) is picked up by the
next call to ``t()``.  Nothing is cached between calls.

The formulas are applied exactly as written below, without algebraic
rearrangement, so results match the established reference outputs:

Paired (row-matched observations)::

    n  = number of non-missing cells in column 0
    d  = x[i, 0] - x[i, 1]                for i in 0 .. n-1
    t  = sum(d) / sqrt((n * sum(d**2) - sum(d)**2) / (n - 1))

Unpaired (independent samples, column lengths may differ)::

    ss_k = sum((x - mean_k)**2) / n_k     over non-missing x in column k
    t    = |(mean_1 - mean_2) / sqrt(ss_1 / (n_1 - 1) + ss_2 / (n_2 - 1))|

Degenerate inputs (``n`` of 0 or 1) are not guarded and produce ``NaN``
or ``inf``.
"""

import math
from typing import Optional

import numpy as np

from .constants import COL_FIRST, COL_SECOND
from .data_file import DataFile
from .data_model import TestType

DEFAULT_TEST_TYPE = TestType.PAIRED


class TTest:
    """Calculator for the paired or unpaired t-statistic.

    Parameters
    ----------
    data : DataFile or None
        The data to analyse.  May be attached later with ``attach``.
    test_type : TestType
        Which formula ``t()`` applies.  Defaults to ``TestType.PAIRED``.
    """

    def __init__(
        self,
        data: Optional[DataFile] = None,
        test_type: TestType = DEFAULT_TEST_TYPE,
    ):
        self.data = data
        self.test_type = test_type

    @property
    def test_type(self) -> TestType:
        return self._test_type

    @test_type.setter
    def test_type(self, value) -> None:
        # Raises ValueError for anything outside the enumeration
        self._test_type = TestType(value)

    def has_data(self) -> bool:
        return self.data is not None

    def attach(self, data: DataFile) -> None:
        self.data = data

    def detach(self) -> None:
        self.data = None

    def t(self) -> float:
        """Calculate t for the attached data.

        Only call this once ``has_data()`` is ``True``; the calculator
        does not check.  A data file with fewer than two columns raises
        ``OutOfRangeError``.
        """
        if self._test_type is TestType.PAIRED:
            return self._paired_t()
        return self._unpaired_t()

    def _paired_t(self) -> float:
        data = self.data
        n = data.column_item_count(COL_FIRST)

        sum_diffs = 0.0
        sum_diffs2 = 0.0
        for i in range(n):
            diff = data.item(i, COL_FIRST) - data.item(i, COL_SECOND)
            sum_diffs += diff
            sum_diffs2 += diff * diff

        with np.errstate(all='ignore'):
            spread = np.float64(n * sum_diffs2 - sum_diffs * sum_diffs) / np.float64(n - 1)
            return float(np.float64(sum_diffs) / np.sqrt(spread))

    def _unpaired_t(self) -> float:
        data = self.data
        n1 = data.column_item_count(COL_FIRST)
        n2 = data.column_item_count(COL_SECOND)
        with np.errstate(all='ignore'):
            mean1 = float(np.float64(data.column_sum(COL_FIRST)) / np.float64(n1))
            mean2 = float(np.float64(data.column_sum(COL_SECOND)) / np.float64(n2))

        sum_mean_diffs1 = 0.0
        sum_mean_diffs2 = 0.0
        # Bottom row first
        for i in range(data.row_count() - 1, -1, -1):
            x = data.item(i, COL_FIRST)
            if not math.isnan(x):
                x -= mean1
                sum_mean_diffs1 += x * x

            x = data.item(i, COL_SECOND)
            if not math.isnan(x):
                x -= mean2
                sum_mean_diffs2 += x * x

        with np.errstate(all='ignore'):
            sum_mean_diffs1 = np.float64(sum_mean_diffs1) / np.float64(n1)
            sum_mean_diffs2 = np.float64(sum_mean_diffs2) / np.float64(n2)
            t = np.float64(mean1 - mean2) / np.sqrt(
                sum_mean_diffs1 / np.float64(n1 - 1)
                + sum_mean_diffs2 / np.float64(n2 - 1)
            )

        # Unpaired t is always reported as a magnitude
        return float(abs(t))
