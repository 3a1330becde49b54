"""
Shared 12 x 2 sample data (condition A, condition B) and its expected
aggregates.  If TEST_DATA changes, every expected value below must be
checked and updated with it.
"""

TEST_DATA = [
    [12.0, 14.0],
    [12.0, 14.0],
    [12.0, 14.0],
    [15.0, 14.0],
    [13.0, 16.0],
    [12.0, 15.0],
    [13.0, 18.0],
    [14.0, 17.0],
    [15.0, 14.0],
    [15.0, 13.0],
    [14.0, 15.0],
    [13.0, 14.0],
]
TEST_CSV = "\n".join(",".join(f"{v:g}" for v in row) for row in TEST_DATA) + "\n"

ROW_COUNT = 12
COLUMN_COUNT = 2
ITEM_COUNT = 24
ROW_SUMS = [26, 26, 26, 29, 29, 27, 31, 31, 29, 28, 29, 27]
COLUMN_SUMS = [160, 178]
TOTAL_SUM = 338
ROW_MEANS = [13, 13, 13, 14.5, 14.5, 13.5, 15.5, 15.5, 14.5, 14, 14.5, 13.5]
COLUMN_MEANS = [13.33333333, 14.83333333]
ARITHMETIC_MEAN = 14.0833333
