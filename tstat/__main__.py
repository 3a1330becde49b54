"""
Entry point for tstat.

Usage:
    python -m tstat [-t {paired|unpaired}] [-s] [--plot PNG] DATAFILE

Prints the data grid followed by ``t = <statistic>``.  Exit codes are
listed in ``constants``.
"""

import argparse
import sys
import warnings

from . import APP_DATE, APP_NAME, APP_VERSION
from .constants import (
    EXIT_ERR_EMPTY_DATA_FILE, EXIT_ERR_MISSING_TEST_TYPE,
    EXIT_ERR_NO_DATA_FILE, EXIT_ERR_UNRECOGNISED_TEST_TYPE, EXIT_ERR_USAGE,
    EXIT_OK, PAIRED_TEST_TYPE_ARG, UNPAIRED_TEST_TYPE_ARG,
)
from .data_file import DataFile
from .data_model import TestType
from .report import (
    format_data_file, format_statistic, format_summary, summarise_columns,
)
from .ttest import TTest


class UsageError(Exception):
    """Command-line arguments could not be parsed."""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=APP_NAME,
        description=(
            "Calculate Student's t-statistic for the first two columns "
            "of a CSV data file."
        ),
    )
    parser.add_argument(
        '-t', '--type',
        dest='test_type',
        nargs='?',
        const=None,
        default=UNPAIRED_TEST_TYPE_ARG,
        metavar=f"{{{PAIRED_TEST_TYPE_ARG}|{UNPAIRED_TEST_TYPE_ARG}}}",
        help=f"type of test (default: {UNPAIRED_TEST_TYPE_ARG})",
    )
    parser.add_argument(
        '-s', '--summary',
        action='store_true',
        help="also print the count, sum and mean of both columns",
    )
    parser.add_argument(
        '--plot',
        metavar='PNG',
        help="save a chart of the two columns to this PNG file",
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f"{APP_NAME} {APP_VERSION} ({APP_DATE})",
    )
    parser.add_argument(
        'datafile',
        nargs='?',
        help="path to the CSV data file",
    )
    return parser


def _load_data_file(path: str) -> DataFile:
    """Load *path*, echoing any load warnings to stderr."""
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter('always')
        data = DataFile(path)
    for w in caught:
        print(f"WARNING: {w.message}", file=sys.stderr)
    return data


def _save_plot(data: DataFile, test_type: TestType, t: float, path: str) -> None:
    # Headless backend; chart modules only touch Figure objects
    import matplotlib
    matplotlib.use('Agg')
    from matplotlib.figure import Figure

    from .chart_columns import render_columns
    from .export import export_png

    fig = Figure(figsize=(6.0, 4.0))
    render_columns(fig, data, test_type=test_type, t=t)
    export_png(fig, path)


def main(argv=None) -> int:
    """Run the command line and return the process exit code."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as exc:
        parser.print_usage(sys.stderr)
        print(f"ERR {exc}", file=sys.stderr)
        return EXIT_ERR_USAGE

    if args.test_type is None:
        print(
            f"ERR -t option requires a type of test - "
            f"{PAIRED_TEST_TYPE_ARG} or {UNPAIRED_TEST_TYPE_ARG}",
            file=sys.stderr,
        )
        return EXIT_ERR_MISSING_TEST_TYPE

    try:
        test_type = TestType.parse(args.test_type)
    except ValueError:
        print(f'ERR unrecognised test type "{args.test_type}"', file=sys.stderr)
        return EXIT_ERR_UNRECOGNISED_TEST_TYPE

    if not args.datafile:
        print("No data file provided.", file=sys.stderr)
        return EXIT_ERR_NO_DATA_FILE

    data = _load_data_file(args.datafile)
    if data.is_empty():
        print(
            "No data in data file (or data file does not exist or could "
            "not be opened).",
            file=sys.stderr,
        )
        return EXIT_ERR_EMPTY_DATA_FILE

    for line in format_data_file(data):
        print(line)

    if args.summary:
        for line in format_summary(summarise_columns(data)):
            print(line)

    t = TTest(data, test_type).t()
    print(format_statistic(t))

    if args.plot:
        _save_plot(data, test_type, t, args.plot)

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
