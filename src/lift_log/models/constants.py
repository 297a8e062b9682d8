"""Spreadsheet layout and rendering constants."""

# Columns selected when copying an exercise block from the spreadsheet:
# sets, reps, rpe, weight, actual weight, actual rpe.
COLS_PER_ROW = 6

# One title row followed by the detail rows.
DETAIL_ROWS_PER_EXERCISE = 6
ROWS_PER_EXERCISE = 1 + DETAIL_ROWS_PER_EXERCISE

# Rendered in place of an RPE of zero (below trackable RPE).
LOW_RPE_MARKER = "<5"

# Rendered for a reps/sets cell that failed to parse.
INVALID_NUMBER_MARKER = "NaN"

# Rendered for an optional number that was left empty.
ABSENT_NUMBER_MARKER = "null"

LINE_BREAK_HTML = "<br/>"

# (long form, short form) pairs applied after lowercasing.
ABBREVIATIONS: tuple[tuple[str, str], ...] = (
    ("competition", "comp"),
)
