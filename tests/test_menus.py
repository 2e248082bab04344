import io
from pathlib import Path

import pytest

from rowscols.analysis import CsvAnalysisResults, CsvColumnDataType, CsvColumnInformation
from rowscols.errors import ConfigurationError, FileSystemError
from rowscols.menus import (
    format_completion_status,
    format_startup_banner,
    format_usage_help,
    interactive_csv_path_input,
    post_analysis_menu,
)
from rowscols.workspace import ApplicationDirectoryPaths


def _feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def _paths():
    return ApplicationDirectoryPaths(
        executable_parent_directory=Path("/test/exe"),
        rows_columns_root_directory=Path("/test/exe/rows_columns_data"),
        csv_imports_directory=Path("/test/exe/rows_columns_data/csv_imports"),
        analysis_cache_directory=Path("/test/exe/rows_columns_data/analysis_cache"),
    )


def _analysis(types):
    columns = [
        CsvColumnInformation(index, f"c{index}", data_type)
        for index, data_type in enumerate(types)
    ]
    return CsvAnalysisResults(
        csv_file_path=Path("/data/people.csv"),
        has_header_row=True,
        total_column_count=len(columns),
        total_data_row_count=3,
        columns=columns,
        metadata_file_path=Path("/data/people.csv_metadata.toml"),
        metadata_file_already_existed=False,
    )


def test_usage_help_lists_commands():
    text = format_usage_help()
    assert text.startswith("USAGE:\n")
    assert "  rows_and_columns --help              Show this help information" in text
    assert "  rows_and_columns data/customers.csv" in text


def test_startup_banner_is_framed():
    lines = format_startup_banner().splitlines()
    assert lines[0] == lines[3] == lines[-2]
    assert set(lines[0]) == {"═"}
    assert "  rows_and_columns - CSV Analysis & TUI Dashboard System" in lines


def test_interactive_input_returns_valid_path(monkeypatch, capsys, tmp_path):
    csv_file = tmp_path / "data.csv"
    csv_file.write_text("a,b\n1,2\n", encoding="utf-8")
    missing = tmp_path / "missing.csv"
    _feed(monkeypatch, f"\nhelp\n{missing}\n{csv_file}\n")

    result = interactive_csv_path_input()

    assert result == str(csv_file.resolve())
    out = capsys.readouterr().out
    assert "Please enter a file path, or 'quit' to exit." in out
    assert "Detailed File Input Help" in out
    assert "❌ File issue: File not found" in out
    assert f"✓ Found CSV file: {result}" in out


@pytest.mark.parametrize("command", ["quit", "Q", "EXIT"])
def test_interactive_input_quit_raises(monkeypatch, capsys, command):
    _feed(monkeypatch, f"{command}\n")
    with pytest.raises(ConfigurationError) as info:
        interactive_csv_path_input()
    assert info.value.configuration_issue_description == "User chose to quit file selection"
    assert "Goodbye!" in capsys.readouterr().out


def test_interactive_input_rejects_directory(monkeypatch, capsys, tmp_path):
    _feed(monkeypatch, f"{tmp_path}\nq\n")
    with pytest.raises(ConfigurationError):
        interactive_csv_path_input()
    assert "is a directory, not a file" in capsys.readouterr().out


def test_interactive_input_end_of_input(monkeypatch):
    _feed(monkeypatch, "")
    with pytest.raises(FileSystemError) as info:
        interactive_csv_path_input()
    assert info.value.operation_description == "Failed to read user input"


def test_completion_status_mixed_columns():
    analysis = _analysis(
        [CsvColumnDataType.INTEGER, CsvColumnDataType.FLOAT, CsvColumnDataType.STRING]
    )
    text = format_completion_status(analysis, _paths())
    assert "  • Column data types detected: 3 columns" in text
    assert "continuous columns: min, max, quartiles, mean, stdev" in text
    assert "categorical columns: value distributions, mode, uniqueness" in text
    assert "     • Histograms for numerical data" in text
    assert "     • Bar charts for categorical data" in text
    assert "  /test/exe/rows_columns_data/csv_imports" in text.splitlines()
    assert text.rstrip().endswith(f"rows_and_columns {analysis.csv_file_path}")


def test_completion_status_categorical_only():
    analysis = _analysis([CsvColumnDataType.BOOLEAN, CsvColumnDataType.STRING])
    text = format_completion_status(analysis, _paths())
    assert "continuous columns" not in text
    assert "Histograms for numerical data" not in text
    assert "Value distribution displays" in text
    assert f"  Metadata: {analysis.metadata_file_path}" in text


def test_post_analysis_menu_handles_all_choices(monkeypatch, capsys):
    _feed(monkeypatch, "1\nload\n3\nhelp\n\nbogus\n4\n")
    assert post_analysis_menu() is None
    out = capsys.readouterr().out
    assert "🔧 Column data type review selected." in out
    assert "📂 Data loading into directory structure selected." in out
    assert "📄 Export analysis report selected." in out
    assert "Menu Options Help" in out
    assert "Please enter a selection (1-4) or 'help' for assistance." in out
    assert "Invalid selection: 'bogus'" in out
    assert out.rstrip().endswith("Your analysis results and metadata have been saved.")


def test_post_analysis_menu_immediate_quit(monkeypatch, capsys):
    _feed(monkeypatch, "q\n")
    post_analysis_menu()
    out = capsys.readouterr().out
    assert "Thank you for using rows_and_columns!" in out
    assert "selected." not in out


def test_post_analysis_menu_end_of_input(monkeypatch):
    _feed(monkeypatch, "1\n")
    with pytest.raises(FileSystemError):
        post_analysis_menu()