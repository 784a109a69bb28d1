# tidyviewer

A pretty printer for tables of strings. Each column gets its own width.
Numbers are cut to a set number of significant figures and lined up on
the decimal point. Missing values (`NA`, `null`, `n/a`, `None`, `missing`,
empty cells and similar) are shown as `NA`. When colour is on, headers,
negative numbers and missing values are coloured with 24-bit escape codes.

## Installation

```
pip install tidyviewer
```

## Usage

The first row is the header. The other rows are the data.

```python
from tidyviewer.table import TableConfig, display_table, render_table

rows = [
    ["a", "b"],
    ["1", "b"],
    ["4.1453", "c"],
    ["2.4", "f"],
    ["5", "e"],
]

display_table(rows)                        # write the table to standard output
text = render_table(rows, TableConfig())   # or get the table back as a string
```

`display_table(rows, config=None, file=None)` writes to `file`, or to
standard output when none is given; a closed pipe is ignored.
`render_table` raises `ValueError` when there are no rows or when a shown
row has fewer cells than the header.

`TableConfig` is a dataclass; its fields control the output:

- `sigfig`: significant figures for numbers (default 3)
- `lower_column_width`, `upper_column_width`: column width limits
  (default 2 and 50). Wider cells are cut and end in `…`.
- `title_option`, `footer_option`: a title above and a footer below the
  table (left out while empty)
- `display_meta`: print a `tv dim: <rows> x <cols>` line first
- `line_counter`: number the data rows
- `is_tty`, `is_force_color`: colour is used when either is true; `is_tty`
  defaults to whether standard output is a terminal
- `std_color`, `neg_num_color`, `na_color`, `meta_color`, `header_color`:
  RGB triples
- `extend_option` (default `True`): show every row and column. When it is
  off, at most `row_display_option` data rows (default 25) are shown, only
  the columns whose headers fit in the terminal width (`term_tuple`) are
  printed, and a line such as `… with 10 more rows and 2 more variables: x, y`
  says what was left out.
- `debug_mode`: put the transposed columns, their guessed types and the
  formatted cells at the top of the output

## Lower-level helpers

`tidyviewer.datatype` guesses the type of a value with
`infer_type_from_string`, which returns a `ValueType`, and the most frequent
type of a column with `get_col_data_type` (a `ValueError` if every value is
missing). It has the checks `is_logical`, `is_integer`, `is_double`,
`is_number`, `is_negative_number`, `is_time`, `is_date`, `is_date_time`,
`is_na` and `is_na_string_padded`, and formats a whole column with
`format_strings(column, lower_column_width, upper_column_width, sigfig)`.

`tidyviewer.sigfig` turns a float into a short string:

```python
from tidyviewer.sigfig import DecimalSplits

DecimalSplits(12.345, 3).final_string()    # "12.3"
DecimalSplits(-0.12345, 3).final_string()  # "-0.123"
DecimalSplits(1234.5, 3).final_string()    # "1234."
```

## What it does not do

tidyviewer is a library only. It has no command-line program, and it does
not read CSV or other files: it takes rows that are already lists of
strings.

## Running the tests

```
pip install -e ".[test]"
pytest
```