"""
Constants for tstat.

Centralises the CSV delimiter and missing-value sentinel, the
command-line test-type words and exit codes, the text output formats,
and the chart palette and export settings.
"""

import math

# ── CSV loading ──────────────────────────────────────────────────────────
DEFAULT_DELIMITER = ','
MISSING_VALUE = math.nan

# Non-numeric cells listed individually in the load warning
MAX_REPORTED_BAD_CELLS = 10

# ── Columns compared by the t-test ───────────────────────────────────────
COL_FIRST = 0
COL_SECOND = 1

# ── Command-line test-type words (matched case-insensitively) ───────────
PAIRED_TEST_TYPE_ARG = "paired"
UNPAIRED_TEST_TYPE_ARG = "unpaired"

# ── Process exit codes ───────────────────────────────────────────────────
EXIT_OK = 0
EXIT_ERR_MISSING_TEST_TYPE = 1
EXIT_ERR_UNRECOGNISED_TEST_TYPE = 2
EXIT_ERR_NO_DATA_FILE = 3
EXIT_ERR_EMPTY_DATA_FILE = 4
EXIT_ERR_USAGE = 5

# ── Text output ──────────────────────────────────────────────────────────
CELL_FORMAT = "{:0.3f}  "
MISSING_CELL_TEXT = "      "
STATISTIC_FORMAT = "t = {:0.6f}"

# ── Chart palette ────────────────────────────────────────────────────────
CHART_PALETTE = {
    'first':       '#0033A1',   # column 0 markers / line
    'second':      '#ED7D31',   # column 1 markers / line
    'first_mean':  '#002070',
    'second_mean': '#C55A11',
    'pair_link':   '#BFBFBF',   # paired-observation connectors
    'text':        '#333333',
    'grid':        '#cccccc',
}

# ── Export settings ──────────────────────────────────────────────────────
EXPORT_DPI = 300
EXPORT_WIDTH_INCHES = 6.0
