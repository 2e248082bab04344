from pathlib import Path

import pytest

from rowscols.analysis import (
    CSV_SAMPLE_ROWS_FOR_TYPE_DETECTION,
    CsvColumnDataType,
    CsvColumnInformation,
    analyze_basic_structure,
    analyze_column_types,
    analyze_csv_file,
    count_numeric_fields,
    detect_column_data_type,
    detect_header_row,
    is_boolean_value,
    metadata_file_path,
    parse_data_type,
    render_metadata,
    split_csv_line,
    write_metadata_file,
)
from rowscols.errors import ConfigurationError, CsvProcessingError, FileSystemError


def _write(path: Path, text: str) -> Path:
    path.write_bytes(text.encode("utf-8"))
    return path


@pytest.mark.parametrize(
    "text, expected",
    [
        ("boolean", CsvColumnDataType.BOOLEAN),
        ("BOOL", CsvColumnDataType.BOOLEAN),
        ("int", CsvColumnDataType.INTEGER),
        ("decimal", CsvColumnDataType.FLOAT),
        ("number", CsvColumnDataType.FLOAT),
        ("Text", CsvColumnDataType.STRING),
        ("str", CsvColumnDataType.STRING),
        ("date", None),
    ],
)
def test_parse_data_type_aliases(text, expected):
    assert parse_data_type(text) is expected


@pytest.mark.parametrize("data_type", list(CsvColumnDataType))
def test_data_type_round_trip(data_type):
    assert parse_data_type(data_type.value) is data_type


def test_split_csv_line_keeps_empty_fields():
    assert split_csv_line("a,,b") == ["a", "", "b"]
    assert split_csv_line("") == [""]


def test_count_numeric_fields_invariants():
    numeric = [" 7 ", "-3", "2.5", "1e3", "inf"]
    assert count_numeric_fields(numeric) == len(numeric)
    assert count_numeric_fields(["abc", "", "1_000", "x1"]) == 0


@pytest.mark.parametrize("value", ["true", "false", "yes", "no", "1", "0", "t", "f", "y", "n"])
def test_boolean_words(value):
    assert is_boolean_value(value) is True


@pytest.mark.parametrize("value", ["TRUE", "2", "maybe", ""])
def test_non_boolean_words(value):
    assert is_boolean_value(value) is False


def test_detect_header_row():
    assert detect_header_row("name,age", "alice,30") is True
    assert detect_header_row("1,2", "3,4") is False
    assert detect_header_row("name,age", None) is False


@pytest.mark.parametrize(
    "samples, expected",
    [
        ([], CsvColumnDataType.STRING),
        (["true", "false", "yes"], CsvColumnDataType.BOOLEAN),
        (["10", "20", "30", "40"], CsvColumnDataType.INTEGER),
        (["1.5", "2.5", "3.5"], CsvColumnDataType.FLOAT),
        (["apple", "pear", "plum"], CsvColumnDataType.STRING),
        (["hello"], CsvColumnDataType.BOOLEAN),
    ],
)
def test_detect_column_data_type(samples, expected):
    assert detect_column_data_type(samples) is expected


def test_basic_structure_single_line(tmp_path):
    csv_path = _write(tmp_path / "one.csv", "1,2,3\n")
    assert analyze_basic_structure(csv_path) == (False, 3, 1)


def test_basic_structure_detects_header(tmp_path):
    csv_path = _write(tmp_path / "h.csv", "name,age\nalice,30\nbob,40\n")
    has_header, columns, _rows = analyze_basic_structure(csv_path)
    assert has_header is True
    assert columns == 2


def test_basic_structure_empty_file(tmp_path):
    csv_path = _write(tmp_path / "empty.csv", "")
    with pytest.raises(CsvProcessingError) as info:
        analyze_basic_structure(csv_path)
    assert info.value.csv_line_number == 1


def test_basic_structure_missing_file(tmp_path):
    with pytest.raises(FileSystemError):
        analyze_basic_structure(tmp_path / "missing.csv")


def test_column_types_with_header_and_crlf(tmp_path):
    csv_path = _write(tmp_path / "people.csv", "name,age\r\nalice,30\r\nbob,\r\n")
    columns = analyze_column_types(csv_path, True, 2)
    assert [column.column_name for column in columns] == ["name", "age"]
    assert [column.column_index for column in columns] == [0, 1]
    assert columns[0].sample_values == ["alice", "bob"]
    assert columns[1].empty_value_count == 1
    assert columns[1].non_empty_value_count == 1


def test_column_types_without_header_generates_names(tmp_path):
    csv_path = _write(tmp_path / "nums.csv", "1.5,x\n2.5,y\n3.5,z\n")
    columns = analyze_column_types(csv_path, False, 2)
    assert [column.column_name for column in columns] == ["column_1", "column_2"]
    assert columns[0].detected_data_type is CsvColumnDataType.FLOAT
    assert columns[1].detected_data_type is CsvColumnDataType.STRING


def test_column_types_sample_limits(tmp_path):
    rows = "\n".join(f"{value}" for value in range(100, 120))
    csv_path = _write(tmp_path / "many.csv", "value\n" + rows + "\n")
    (column,) = analyze_column_types(csv_path, True, 1)
    assert column.non_empty_value_count + column.empty_value_count == (
        CSV_SAMPLE_ROWS_FOR_TYPE_DETECTION
    )
    assert column.sample_values == ["100", "101", "102", "103", "104"]
    assert column.detected_data_type is CsvColumnDataType.INTEGER


def test_column_types_extra_fields_ignored(tmp_path):
    csv_path = _write(tmp_path / "extra.csv", "a,b\nx,y,z\n")
    columns = analyze_column_types(csv_path, True, 2)
    assert len(columns) == 2
    assert columns[1].sample_values == ["y"]


def test_column_types_header_on_empty_file(tmp_path):
    csv_path = _write(tmp_path / "empty.csv", "")
    with pytest.raises(CsvProcessingError):
        analyze_column_types(csv_path, True, 1)


def test_metadata_file_path(tmp_path):
    assert metadata_file_path(tmp_path / "sales.csv") == tmp_path / "sales.csv_metadata.toml"


def test_metadata_file_path_without_name():
    with pytest.raises(ConfigurationError):
        metadata_file_path(Path("/"))


def test_render_metadata_contents():
    columns = [
        CsvColumnInformation(0, "name", CsvColumnDataType.STRING, 2, 1, ["a"]),
        CsvColumnInformation(1, "age", CsvColumnDataType.INTEGER, 3, 0, ["30"]),
    ]
    text = render_metadata(columns)
    assert text.startswith("# CSV Metadata File\n# Generated by rows_and_columns\n\n")
    assert "total_columns = 2\n" in text
    assert '[column_2]\nname = "age"\ndata_type = "integer"\ncolumn_index = 1\n' in text
    assert "non_empty_values = 2\nempty_values = 1\n" in text


def test_write_metadata_file_creates_parents(tmp_path):
    target = tmp_path / "nested" / "dir" / "x.csv_metadata.toml"
    columns = [CsvColumnInformation(0, "flag", CsvColumnDataType.BOOLEAN)]
    write_metadata_file(target, columns)
    assert target.read_text(encoding="utf-8") == render_metadata(columns)


def test_analyze_csv_file_creates_then_updates_metadata(tmp_path, capsys):
    csv_path = _write(tmp_path / "data.csv", "name,score\nann,1.5\nben,2.5\ncid,3.5\n")
    first = analyze_csv_file(csv_path)
    assert first.metadata_file_already_existed is False
    assert first.metadata_file_path == tmp_path / "data.csv_metadata.toml"
    assert first.metadata_file_path.read_text(encoding="utf-8") == render_metadata(first.columns)
    assert first.has_header_row is True
    assert first.total_column_count == 2
    assert first.columns[1].detected_data_type is CsvColumnDataType.FLOAT
    assert "Will create metadata file" in capsys.readouterr().out

    second = analyze_csv_file(csv_path)
    assert second.metadata_file_already_existed is True
    assert "Found existing metadata file" in capsys.readouterr().out