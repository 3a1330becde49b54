"""
tstat v1.0.0

Student's t-statistic calculator for two-column CSV data files.

Loads a comma-separated grid of numbers (blank or non-numeric cells are
treated as missing), and computes the paired or unpaired t-statistic
over the first two columns.
"""

APP_NAME = "tstat"
APP_VERSION = "1.0.0"
APP_DATE = "2026-10-19"
__version__ = APP_VERSION

from .data_file import DataFile, OutOfRangeError  # noqa: E402
from .data_model import ColumnSummary, TestType  # noqa: E402
from .ttest import TTest  # noqa: E402

__all__ = [
    'DataFile', 'OutOfRangeError', 'ColumnSummary', 'TestType', 'TTest',
]
