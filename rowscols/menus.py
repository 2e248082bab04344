"""Text screens and interactive prompts of the command-line interface."""

from __future__ import annotations

from rowscols.analysis import CsvAnalysisResults
from rowscols.errors import ConfigurationError, FileSystemError
from rowscols.statistics import CsvFieldType, field_type_for
from rowscols.workspace import ApplicationDirectoryPaths, validate_user_csv_path

_RULE = "═" * 63


def _join(lines: list[str]) -> str:
    return "\n".join(lines) + "\n"


def _read_input(prompt: str) -> str:
    """Prompt the user and return the trimmed answer."""
    try:
        return input(f"{prompt}: ").strip()
    except (EOFError, OSError) as error:
        raise FileSystemError("Failed to read user input", error) from error


def format_usage_help() -> str:
    """Command-line usage text."""
    return _join(
        [
            "USAGE:",
            "  rows_and_columns <csv_file_path>     Process a specific CSV file",
            "  rows_and_columns --help              Show this help information",
            "",
            "EXAMPLES:",
            "  rows_and_columns data/customers.csv",
            "  rows_and_columns /home/user/sales_data.csv",
            "  rows_and_columns ../reports/quarterly.csv",
            "",
            "FEATURES:",
            "  • Directory-based CSV data storage for scalability",
            "  • Pandas-style statistical analysis",
            "  • ASCII/Unicode TUI charts and visualizations",
            "  • Binary-relative path management for portability",
            "",
        ]
    )


def format_startup_banner() -> str:
    """Banner shown when the application starts."""
    return _join(
        [
            _RULE,
            "  rows_and_columns - CSV Analysis & TUI Dashboard System",
            "  Version: 1.0.0 | License: MIT",
            _RULE,
            "  • Directory-based CSV data storage for scalability",
            "  • Pandas-style statistical analysis",
            "  • ASCII/Unicode TUI charts and visualizations",
            "  • Binary-relative path management for portability",
            _RULE,
            "",
        ]
    )


def _file_input_instructions() -> str:
    return _join(
        [
            "📁 File Selection Help:",
            "  • Enter the path to your CSV file (absolute or relative)",
            "  • Examples:",
            "    data/customers.csv",
            "    /home/user/reports/sales.csv",
            "    ../datasets/analysis_data.csv",
            "  • Special commands:",
            "    'help' - Show detailed help",
            "    'quit' - Exit the application",
            "",
        ]
    )


def _detailed_file_input_help() -> str:
    return _join(
        [
            _RULE,
            "  Detailed File Input Help",
            _RULE,
            "",
            "FILE PATH FORMATS:",
            "  Absolute paths (full path from root):",
            "    Linux/Mac: /home/username/data/file.csv",
            "    Windows:   C:\\Users\\username\\data\\file.csv",
            "",
            "  Relative paths (from current directory):",
            "    Same directory:    file.csv",
            "    Subdirectory:      data/file.csv",
            "    Parent directory:  ../file.csv",
            "",
            "FILE REQUIREMENTS:",
            "  • File must exist and be readable",
            "  • File extension should be .csv or .tsv",
            "  • File should contain comma-separated values",
            "",
            "TROUBLESHOOTING:",
            "  • Check file path spelling and capitalization",
            "  • Ensure file permissions allow reading",
            "  • Use tab completion in your terminal if available",
            "  • Try absolute path if relative path doesn't work",
            "",
            "EXAMPLES OF VALID PATHS:",
            "  ./data/customers.csv",
            "  ~/Documents/spreadsheet.csv",
            "  /tmp/analysis_data.csv",
            "",
            _RULE,
            "",
        ]
    )


def interactive_csv_path_input() -> str:
    """Ask for a CSV path until a usable one is given.

    Returns the absolute path as text. Raises ConfigurationError when the
    user quits and FileSystemError when input cannot be read.
    """
    print("No CSV file specified. Let's find one to analyze!")
    print()
    while True:
        print(_file_input_instructions(), end="")
        answer = _read_input("Enter CSV file path")
        command = answer.lower()
        if command == "":
            print("Please enter a file path, or 'quit' to exit.")
            print()
        elif command in ("quit", "q", "exit"):
            print("Goodbye!")
            raise ConfigurationError("User chose to quit file selection")
        elif command in ("help", "h", "?"):
            print(_detailed_file_input_help(), end="")
        else:
            try:
                validated = validate_user_csv_path(answer)
            except ValueError as problem:
                print(f"❌ File issue: {problem}")
                print("Please try again, or type 'help' for assistance.")
                print()
                continue
            print(f"✓ Found CSV file: {validated}")
            print()
            return validated


def format_completion_status(
    analysis: CsvAnalysisResults, paths: ApplicationDirectoryPaths
) -> str:
    """Summary of what the analysis did and which steps can follow."""
    field_types = [field_type_for(column.detected_data_type) for column in analysis.columns]
    continuous = sum(1 for kind in field_types if kind is CsvFieldType.CONTINUOUS)
    categorical = len(field_types) - continuous

    lines = [
        "✓ Comprehensive CSV Analysis Complete!",
        "",
        "What was accomplished:",
        "  • File structure analyzed and validated",
        f"  • Column data types detected: {analysis.total_column_count} columns",
        "  • Enhanced statistical analysis performed:",
    ]
    if continuous:
        lines.append(
            f"    - {continuous} continuous columns: min, max, quartiles, mean, stdev"
        )
    if categorical:
        lines.append(
            f"    - {categorical} categorical columns: value distributions, mode, uniqueness"
        )
    lines += [
        "  • Metadata TOML file created/updated",
        "  • Ready for directory-based storage and visualization",
        "",
        "Data will be stored in:",
        f"  {paths.csv_imports_directory}",
        "",
        "Available next steps:",
        "  1. Load data into directory-based storage",
        "  2. Generate statistical summary reports",
        "  3. Create TUI visualizations:",
    ]
    if continuous:
        lines += [
            "     • Histograms for numerical data",
            "     • Box-and-whisker plots",
            "     • Scatter plots (if multiple numerical columns)",
        ]
    if categorical:
        lines += [
            "     • Bar charts for categorical data",
            "     • Value distribution displays",
        ]
    lines += [
        "  4. Interactive data exploration interface",
        "",
        "File references:",
        f"  Metadata: {analysis.metadata_file_path}",
        f"  Original:  {analysis.csv_file_path}",
        "",
        "To reprocess this file:",
        f"  rows_and_columns {analysis.csv_file_path}",
        "",
    ]
    return _join(lines)


def _post_analysis_main_menu() -> str:
    return _join(
        [
            _RULE,
            "  What would you like to do next?",
            _RULE,
            "  1. Review/Edit Column Data Types",
            "  2. 'Load' Data into No-Load DataFrame (not in active memory)",
            "  3. Export Current Analysis Report",
            "  4. Quit",
            "",
            "  💡 Tip: Data loading (option 2) enables visualizations and advanced analysis",
            "  Type 'help' for detailed descriptions of each option.",
            _RULE,
            "",
        ]
    )


def _post_analysis_menu_help() -> str:
    return _join(
        [
            _RULE,
            "  Menu Options Help",
            _RULE,
            "",
            "1. Review/Edit Column Data Types",
            "   • Verify that automatic type detection was accurate",
            "   • Change data types if needed (boolean → string, etc.)",
            "   • Essential step before loading data for analysis",
            "   • Example: Change 'age' from string to integer",
            "",
            "2. 'Load' Data into No-Load DataFrame (not in active memory)",
            "   • Creates scalable directory-based storage system",
            "   • Each column becomes a directory with individual cell files",
            "   • Enables memory-efficient processing of large datasets",
            "   • Required before visualizations and advanced analysis",
            "",
            "3. Export Current Analysis Report",
            "   • Saves statistical analysis results to a file",
            "   • Includes column types, statistics, and metadata",
            "   • Useful for documentation and sharing results",
            "   • Can be done before or after data loading",
            "",
            "4. Quit",
            "   • Exit the application safely",
            "   • Analysis results and metadata files are preserved",
            "   • You can restart analysis later with the same CSV file",
            "",
            "💡 Recommended workflow:",
            "   Analysis → Review Types → Load Data → Visualizations",
            "",
            _RULE,
            "",
        ]
    )


_MENU_ANNOUNCEMENTS = {
    ("1", "review", "types", "edit"): (
        "🔧 Column data type review selected.",
        "This will allow you to verify and modify detected column types.",
    ),
    ("2", "load", "import", "directory"): (
        "📂 Data loading into directory structure selected.",
        "This will create the scalable directory-based storage system.",
    ),
    ("3", "export", "report", "save"): (
        "📄 Export analysis report selected.",
        "This will save the current analysis to a file.",
    ),
}


def post_analysis_menu() -> None:
    """Run the menu shown after analysis until the user quits."""
    print("Analysis complete! Choose your next step:")
    print()
    while True:
        print(_post_analysis_main_menu(), end="")
        selection = _read_input("Selection")
        choice = selection.lower()

        announcement = next(
            (text for keys, text in _MENU_ANNOUNCEMENTS.items() if choice in keys), None
        )
        if announcement is not None:
            for line in announcement:
                print(line)
            print("(Implementation coming in next step)")
            print()
        elif choice in ("4", "quit", "exit", "q"):
            print("Thank you for using rows_and_columns!")
            print("Your analysis results and metadata have been saved.")
            return
        elif choice in ("help", "h", "?"):
            print(_post_analysis_menu_help(), end="")
        elif choice == "":
            print("Please enter a selection (1-4) or 'help' for assistance.")
            print()
        else:
            print(f"Invalid selection: '{selection}'")
            print("Please choose 1-4, or type 'help' for assistance.")
            print()