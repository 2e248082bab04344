"""Command-line entry point: set up directories, analyse a CSV file, show results."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from rowscols.analysis import analyze_csv_file
from rowscols.errors import RowsAndColumnsError
from rowscols.menus import (
    format_completion_status,
    format_startup_banner,
    format_usage_help,
    interactive_csv_path_input,
    post_analysis_menu,
)
from rowscols.statistics import (
    display_enhanced_analysis,
    perform_enhanced_statistical_analysis,
)
from rowscols.workspace import (
    ApplicationDirectoryPaths,
    describe_csv_file,
    format_directory_setup,
    initialize_directory_structure,
    validate_csv_path,
    validate_directory_structure,
)

_HELP_FLAGS = frozenset({"--help", "-h", "help"})


def process_csv_file(path_text: str, paths: ApplicationDirectoryPaths) -> None:
    """Validate, analyse and report on one CSV file, then run the follow-up menu."""
    print(f"Processing CSV file: {path_text}")
    print()

    csv_path = validate_csv_path(path_text)
    print(describe_csv_file(csv_path), end="")

    analysis = analyze_csv_file(csv_path)
    enhanced = perform_enhanced_statistical_analysis(csv_path, analysis)
    display_enhanced_analysis(enhanced)

    print(format_completion_status(analysis, paths), end="")
    post_analysis_menu()


def run(argv: Sequence[str] | None = None) -> None:
    """Run the application with the given arguments (program name excluded).

    Raises RowsAndColumnsError on any failure.
    """
    arguments = list(sys.argv[1:] if argv is None else argv)

    print(format_startup_banner(), end="")

    paths = initialize_directory_structure()
    validate_directory_structure(paths)
    print(format_directory_setup(paths), end="")

    if arguments:
        first = arguments[0]
        if first in _HELP_FLAGS:
            print(format_usage_help(), end="")
            return
        process_csv_file(first, paths)
        return

    csv_path_text = interactive_csv_path_input()
    process_csv_file(csv_path_text, paths)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the application and return the process exit status."""
    try:
        run(argv)
    except RowsAndColumnsError as error:
        print(f"rows_and_columns application error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())