"""CSV structure detection, column type inference and metadata files."""

from __future__ import annotations

import enum
import re
from collections.abc import Iterable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

from rowscols.errors import ConfigurationError, CsvProcessingError, FileSystemError

CSV_SAMPLE_ROWS_FOR_TYPE_DETECTION = 10
MAX_SAMPLE_VALUES_PER_COLUMN = 5
METADATA_FILE_EXTENSION = "csv_metadata.toml"

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_BOOLEAN_WORDS = frozenset({"true", "false", "yes", "no", "1", "0", "t", "f", "y", "n"})


class CsvColumnDataType(enum.Enum):
    """Data type detected for a CSV column; the value is its TOML name."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"

    def __str__(self) -> str:
        return self.value


_DATA_TYPE_ALIASES = {
    "boolean": CsvColumnDataType.BOOLEAN,
    "bool": CsvColumnDataType.BOOLEAN,
    "integer": CsvColumnDataType.INTEGER,
    "int": CsvColumnDataType.INTEGER,
    "float": CsvColumnDataType.FLOAT,
    "decimal": CsvColumnDataType.FLOAT,
    "number": CsvColumnDataType.FLOAT,
    "string": CsvColumnDataType.STRING,
    "text": CsvColumnDataType.STRING,
    "str": CsvColumnDataType.STRING,
}


@dataclass
class CsvColumnInformation:
    """What was learned about one column while sampling the file."""

    column_index: int
    column_name: str
    detected_data_type: CsvColumnDataType
    non_empty_value_count: int = 0
    empty_value_count: int = 0
    sample_values: list[str] = field(default_factory=list)


@dataclass
class CsvAnalysisResults:
    """Structure, columns and metadata location of an analysed CSV file."""

    csv_file_path: Path
    has_header_row: bool
    total_column_count: int
    total_data_row_count: int
    columns: list[CsvColumnInformation]
    metadata_file_path: Path
    metadata_file_already_existed: bool


def parse_data_type(text: str) -> CsvColumnDataType | None:
    """Return the data type named by ``text`` (case-insensitive), or None."""
    return _DATA_TYPE_ALIASES.get(text.lower())


def split_csv_line(line: str) -> list[str]:
    """Split a line on commas; quoting is not interpreted."""
    return line.split(",")


def _is_integer(text: str) -> bool:
    if not _INTEGER_PATTERN.fullmatch(text):
        return False
    return _I64_MIN <= int(text) <= _I64_MAX


def _is_float(text: str) -> bool:
    if not text or not text.isascii() or "_" in text or text != text.strip():
        return False
    try:
        float(text)
    except ValueError:
        return False
    return True


def _is_numeric(text: str) -> bool:
    return _is_integer(text) or _is_float(text)


def count_numeric_fields(fields: Iterable[str]) -> int:
    """Count the fields that parse as an integer or a float once trimmed."""
    return sum(1 for value in fields if _is_numeric(value.strip()))


def detect_header_row(first_line: str, second_line: str | None) -> bool:
    """Guess whether ``first_line`` is a header by comparing numeric fields.

    With no second line the single line is taken to be data.
    """
    if second_line is None:
        return False
    first_numeric = count_numeric_fields(split_csv_line(first_line))
    second_numeric = count_numeric_fields(split_csv_line(second_line))
    return first_numeric < second_numeric


def is_boolean_value(value: str) -> bool:
    """True if a trimmed, lower-case value reads as a boolean."""
    return value in _BOOLEAN_WORDS


def detect_column_data_type(sample_values: Sequence[str]) -> CsvColumnDataType:
    """Pick the type that at least 70% of the samples agree on."""
    if not sample_values:
        return CsvColumnDataType.STRING

    boolean_count = integer_count = float_count = 0
    for sample in sample_values:
        value = sample.strip().lower()
        if is_boolean_value(value):
            boolean_count += 1
        elif _is_integer(value):
            integer_count += 1
        elif _is_float(value):
            float_count += 1

    threshold = (len(sample_values) * 7) // 10
    if boolean_count >= threshold:
        return CsvColumnDataType.BOOLEAN
    if integer_count >= threshold:
        return CsvColumnDataType.INTEGER
    if float_count >= threshold:
        return CsvColumnDataType.FLOAT
    return CsvColumnDataType.STRING


def _strip_line_ending(raw: str) -> str:
    if raw.endswith("\n"):
        raw = raw[:-1]
        if raw.endswith("\r"):
            raw = raw[:-1]
    return raw


def _read_lines(handle, csv_path: Path) -> Iterator[str]:
    try:
        for raw in handle:
            yield _strip_line_ending(raw)
    except (OSError, UnicodeDecodeError) as error:
        raise FileSystemError(f"Failed to read CSV line in: {csv_path}", error) from error


@contextmanager
def _csv_lines(csv_path: Path, purpose: str) -> Iterator[Iterator[str]]:
    try:
        handle = open(csv_path, encoding="utf-8", newline="\n")
    except OSError as error:
        raise FileSystemError(
            f"Failed to open CSV file for {purpose}: {csv_path}", error
        ) from error
    with handle:
        yield _read_lines(handle, csv_path)


def analyze_basic_structure(csv_path: str | Path) -> tuple[bool, int, int]:
    """Return ``(has_header_row, column_count, data_row_count)`` for a file."""
    csv_path = Path(csv_path)
    with _csv_lines(csv_path, "analysis") as lines:
        first_line = next(lines, None)
        if first_line is None:
            raise CsvProcessingError("CSV file appears to be empty", 1)

        column_count = len(split_csv_line(first_line))
        second_line = next(lines, None)
        if (
            second_line is not None
            and len(split_csv_line(second_line)) != column_count
        ):
            print("  Warning: Inconsistent column counts detected")
        has_header_row = detect_header_row(first_line, second_line)

        remaining = sum(1 for _ in lines)

    data_row_count = remaining if has_header_row else remaining + 1
    return has_header_row, column_count, data_row_count


def analyze_column_types(
    csv_path: str | Path, has_header_row: bool, column_count: int
) -> list[CsvColumnInformation]:
    """Sample the first data rows and describe each column."""
    csv_path = Path(csv_path)
    samples: list[list[str]] = [[] for _ in range(column_count)]
    non_empty = [0] * column_count
    empty = [0] * column_count

    with _csv_lines(csv_path, "type analysis") as lines:
        if has_header_row:
            header_line = next(lines, None)
            if header_line is None:
                raise CsvProcessingError(
                    "CSV file appears empty when trying to read header", 1
                )
            column_names = split_csv_line(header_line)
        else:
            column_names = [f"column_{index + 1}" for index in range(column_count)]

        for row_number, line in enumerate(lines):
            if row_number >= CSV_SAMPLE_ROWS_FOR_TYPE_DETECTION:
                break
            for column_index, value in enumerate(split_csv_line(line)[:column_count]):
                trimmed = value.strip()
                if not trimmed:
                    empty[column_index] += 1
                    continue
                non_empty[column_index] += 1
                if len(samples[column_index]) < MAX_SAMPLE_VALUES_PER_COLUMN:
                    samples[column_index].append(trimmed)

    return [
        CsvColumnInformation(
            column_index=index,
            column_name=(
                column_names[index] if index < len(column_names) else f"column_{index + 1}"
            ),
            detected_data_type=detect_column_data_type(samples[index]),
            non_empty_value_count=non_empty[index],
            empty_value_count=empty[index],
            sample_values=samples[index],
        )
        for index in range(column_count)
    ]


def metadata_file_path(csv_path: str | Path) -> Path:
    """Path of the metadata TOML file that sits next to ``csv_path``."""
    csv_path = Path(csv_path)
    stem = csv_path.stem
    if not stem:
        raise ConfigurationError(f"Cannot determine filename from CSV path: {csv_path}")
    return csv_path.parent / f"{stem}.{METADATA_FILE_EXTENSION}"


def render_metadata(columns: Sequence[CsvColumnInformation]) -> str:
    """Render column information as the metadata TOML text."""
    parts = [
        "# CSV Metadata File\n",
        "# Generated by rows_and_columns\n\n",
        f"total_columns = {len(columns)}\n",
        "\n",
    ]
    for column in columns:
        parts.append(
            f"[column_{column.column_index + 1}]\n"
            f'name = "{column.column_name}"\n'
            f'data_type = "{column.detected_data_type.value}"\n'
            f"column_index = {column.column_index}\n"
            f"non_empty_values = {column.non_empty_value_count}\n"
            f"empty_values = {column.empty_value_count}\n"
            "\n"
        )
    return "".join(parts)


def write_metadata_file(
    metadata_path: str | Path, columns: Sequence[CsvColumnInformation]
) -> None:
    """Write the metadata file, creating its directory when missing."""
    metadata_path = Path(metadata_path)
    parent = metadata_path.parent
    if not parent.exists():
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as error:
            raise FileSystemError(
                f"Failed to create metadata file parent directory: {parent}", error
            ) from error
    try:
        metadata_path.write_text(render_metadata(columns), encoding="utf-8")
    except OSError as error:
        raise FileSystemError(
            f"Failed to write metadata file: {metadata_path}", error
        ) from error


def analyze_csv_file(csv_path: str | Path) -> CsvAnalysisResults:
    """Analyse a CSV file and create or refresh its metadata file."""
    csv_path = Path(csv_path)
    print("🔍 Analyzing CSV file structure...")

    has_header_row, column_count, data_row_count = analyze_basic_structure(csv_path)
    print("  ✓ Basic structure detected:")
    print(f"    Columns: {column_count}")
    print(f"    Data rows: {data_row_count}")
    print(f"    Has header: {str(has_header_row).lower()}")

    columns = analyze_column_types(csv_path, has_header_row, column_count)
    print("  ✓ Column types analyzed")

    metadata_path = metadata_file_path(csv_path)
    already_existed = metadata_path.exists()
    if already_existed:
        print(f"  ✓ Found existing metadata file: {metadata_path}")
    else:
        print(f"  ✓ Will create metadata file: {metadata_path}")

    write_metadata_file(metadata_path, columns)
    print("  ✓ Metadata file updated")

    return CsvAnalysisResults(
        csv_file_path=csv_path,
        has_header_row=has_header_row,
        total_column_count=column_count,
        total_data_row_count=data_row_count,
        columns=columns,
        metadata_file_path=metadata_path,
        metadata_file_already_existed=already_existed,
    )