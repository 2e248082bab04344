# rowscols

A small terminal tool for getting a first look at a CSV file. It works out the
file's structure, guesses a type for each column, writes a metadata file next
to the CSV and prints pandas-style summary statistics. It uses only the
standard library.

## Installing

```
pip install .
```

To install with the test dependencies, run `pip install .[test]`, then run `pytest`.

## Running

To analyse one file:

```
rowscols data/customers.csv
```

To show the usage text, run either of these (`help` with no dashes also works):

```
rowscols --help
rowscols -h
```

If you run `rowscols` with no argument, it asks for a file path. At that prompt,
type `help` (or `h` or `?`) for detailed guidance. Type `quit` (or `q` or
`exit`) to leave. The prompt keeps asking until it gets a path to an existing
regular file.

When something fails, the program prints `rows_and_columns application error: ...`
to standard error and exits with status 1. When it succeeds, it exits with
status 0.

## What it does

Every run starts the same way. The program prints a banner, then creates or
reuses a `rows_columns_data/` directory beside the running program. If it
cannot locate the program, it uses the current working directory instead. That
directory holds two subdirectories, `csv_imports/` and `analysis_cache/`. The
program then prints where these directories are.

For the CSV file you give it, the program does the following:

1. Checks that the path exists and is a regular file. If the extension is not
   `.csv` or `.tsv`, it prints a warning and carries on.
2. Prints the file's name, absolute path and size.
3. Counts the columns in the first line. It decides that the first line is a
   header when that line holds fewer numeric fields than the second line. A
   file with only one line is treated as data with no header.
4. Samples up to ten data rows and gives each column a type: `boolean`,
   `integer`, `float` or `string`. A type is chosen when at least 70% of the
   non-empty sampled values match it. The types are tried in that order. A
   column without a header name is called `column_N`.
5. Writes `<name>.csv_metadata.toml` beside the CSV. An existing file is
   overwritten. It holds `total_columns` and one `[column_N]` table for each
   column, with `name`, `data_type`, `column_index`, `non_empty_values` and
   `empty_values`.
6. Reads every data row and prints statistics for each column:
   - **Continuous columns** (integer or float): min, the quartiles (found by
     linear interpolation), max, mean and population standard deviation. It
     also prints the percentage of values that are missing. Values that cannot
     be read as numbers count as missing.
   - **Categorical columns** (boolean or string): the number of unique values,
     the percentage missing, the mode, and the five most common values with
     their shares.
7. Prints a summary and then shows a follow-up menu. Enter `4`, `q`, `quit` or
   `exit` to leave the menu, or `help` for a description of each option.

Fields are split on plain commas. Quoted fields that contain commas are not
handled. Files are read as UTF-8.

## What it does not do

The menu options 1 to 3 are announcements only. Choosing one prints what the
option is meant for and returns you to the menu. The following features do not
exist:

- There is no column-type editing.
- No data is loaded into `csv_imports/`.
- Nothing is stored in `analysis_cache/`.
- There is no report export.
- There are no charts or other visualisations.

## Using it from Python

```python
from rowscols.analysis import analyze_csv_file
from rowscols.statistics import perform_enhanced_statistical_analysis, format_enhanced_analysis

analysis = analyze_csv_file("data/customers.csv")
columns = perform_enhanced_statistical_analysis("data/customers.csv", analysis)
print(format_enhanced_analysis(columns))
```

`analyze_csv_file` prints progress lines and writes the metadata file.
`perform_enhanced_statistical_analysis` also prints progress lines. Each step
also has a function of its own:

- In `rowscols.analysis`: `analyze_basic_structure`, `analyze_column_types`,
  `detect_column_data_type`, `metadata_file_path` and `render_metadata`.
- In `rowscols.statistics`: `calculate_numerical_statistics`,
  `calculate_categorical_statistics` and `percentile`.
- In `rowscols.workspace`: `initialize_directory_structure` and
  `format_file_size`.

`initialize_directory_structure` takes an optional base directory.

When something goes wrong, the functions raise a subclass of
`rowscols.errors.RowsAndColumnsError`. Examples are `FileSystemError`,
`CsvProcessingError` and `ConfigurationError`.