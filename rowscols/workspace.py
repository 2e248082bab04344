"""Application data directories, CSV path validation and file descriptions."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from rowscols.errors import ConfigurationError, FileSystemError

ROWS_COLUMNS_ROOT_DIRECTORY_NAME = "rows_columns_data"
CSV_IMPORTS_SUBDIRECTORY_NAME = "csv_imports"
ANALYSIS_CACHE_SUBDIRECTORY_NAME = "analysis_cache"

_KILOBYTE = 1024
_MEGABYTE = _KILOBYTE * 1024
_GIGABYTE = _MEGABYTE * 1024
_CSV_EXTENSIONS = frozenset({"csv", "tsv"})
_RULE = "═" * 63


@dataclass(frozen=True)
class ApplicationDirectoryPaths:
    """Absolute locations of the directories the application works in."""

    executable_parent_directory: Path
    rows_columns_root_directory: Path
    csv_imports_directory: Path
    analysis_cache_directory: Path


def executable_directory() -> Path:
    """Directory holding the running program, falling back to the working directory."""
    program = sys.argv[0] if sys.argv and sys.argv[0] else ""
    if program:
        candidate = Path(program).resolve()
        if candidate.exists():
            return candidate.parent
    return Path.cwd().resolve()


def _ensure_directory(directory: Path, description: str) -> Path:
    try:
        directory.mkdir(parents=True, exist_ok=True)
        return directory.resolve(strict=True)
    except OSError as error:
        raise FileSystemError(f"Failed to create {description}", error) from error


def initialize_directory_structure(
    base_directory: str | Path | None = None,
) -> ApplicationDirectoryPaths:
    """Create (or reuse) the data directories under ``base_directory``.

    Without a base directory the program's own directory is used.
    """
    base = Path(base_directory) if base_directory is not None else executable_directory()

    root_relative = ROWS_COLUMNS_ROOT_DIRECTORY_NAME
    imports_relative = f"{ROWS_COLUMNS_ROOT_DIRECTORY_NAME}/{CSV_IMPORTS_SUBDIRECTORY_NAME}"
    cache_relative = f"{ROWS_COLUMNS_ROOT_DIRECTORY_NAME}/{ANALYSIS_CACHE_SUBDIRECTORY_NAME}"

    root = _ensure_directory(base / root_relative, f"main directory: {root_relative}")
    imports = _ensure_directory(
        base / imports_relative, f"CSV imports directory: {imports_relative}"
    )
    cache = _ensure_directory(
        base / cache_relative, f"analysis cache directory: {cache_relative}"
    )

    return ApplicationDirectoryPaths(
        executable_parent_directory=base,
        rows_columns_root_directory=root,
        csv_imports_directory=imports,
        analysis_cache_directory=cache,
    )


def validate_directory_structure(paths: ApplicationDirectoryPaths) -> None:
    """Raise ConfigurationError unless every directory exists and is a directory."""
    checks = [
        (
            paths.executable_parent_directory,
            "Executable parent directory does not exist after initialization",
            "Executable parent path exists but is not a directory",
        ),
        (
            paths.rows_columns_root_directory,
            "Main rows_columns_data directory does not exist after creation",
            "Main rows_columns_data path exists but is not a directory",
        ),
        (
            paths.csv_imports_directory,
            "CSV imports directory does not exist after creation",
            "CSV imports path exists but is not a directory",
        ),
        (
            paths.analysis_cache_directory,
            "Analysis cache directory does not exist after creation",
            "Analysis cache path exists but is not a directory",
        ),
    ]
    for directory, missing_message, not_directory_message in checks:
        if not directory.exists():
            raise ConfigurationError(missing_message)
        if not directory.is_dir():
            raise ConfigurationError(not_directory_message)


def format_directory_setup(paths: ApplicationDirectoryPaths) -> str:
    """Describe the initialised directories for the user."""
    lines = [
        "✓ Directory structure initialized successfully:",
        "",
        "  Executable Location:",
        f"    {paths.executable_parent_directory}",
        "",
        "  Data Storage Root:",
        f"    {paths.rows_columns_root_directory}",
        "",
        "  CSV Imports Directory:",
        f"    {paths.csv_imports_directory}",
        "",
        "  Analysis Cache Directory:",
        f"    {paths.analysis_cache_directory}",
        "",
        _RULE,
        "",
    ]
    return "\n".join(lines) + "\n"


def format_file_size(size_bytes: int) -> str:
    """Human-readable size such as ``"1.5 KB"`` or ``"12 B"``."""
    if size_bytes >= _GIGABYTE:
        return f"{size_bytes / _GIGABYTE:.1f} GB"
    if size_bytes >= _MEGABYTE:
        return f"{size_bytes / _MEGABYTE:.1f} MB"
    if size_bytes >= _KILOBYTE:
        return f"{size_bytes / _KILOBYTE:.1f} KB"
    return f"{size_bytes} B"


def _extension(path: Path) -> str | None:
    suffix = path.suffix
    return suffix[1:].lower() if suffix else None


def validate_csv_path(path_text: str) -> Path:
    """Check a command-line CSV path and return it as an absolute path."""
    file_path = Path(path_text)
    if not file_path.exists():
        raise FileSystemError(
            f"CSV file does not exist: {path_text}", FileNotFoundError("File not found")
        )
    if not file_path.is_file():
        raise ConfigurationError(f"Path exists but is not a file: {path_text}")

    extension = _extension(file_path)
    if extension is None:
        print("Warning: File has no extension. Ensure this is a comma-separated values file.")
        print()
    elif extension not in _CSV_EXTENSIONS:
        print(f"Warning: File extension '{extension}' is not typical for CSV files.")
        print("         Proceeding anyway, but ensure this is a comma-separated values file.")
        print()

    try:
        return file_path.resolve(strict=True)
    except OSError as error:
        raise FileSystemError(
            f"Failed to resolve absolute path for: {path_text}", error
        ) from error


def validate_user_csv_path(path_text: str) -> str:
    """Check an interactively entered CSV path.

    Returns the absolute path as text; raises ValueError with a message
    meant for the user when the path cannot be used.
    """
    file_path = Path(path_text)
    if not file_path.exists():
        raise ValueError(
            f"File not found: '{path_text}'. Please check the path and try again."
        )
    if not file_path.is_file():
        if file_path.is_dir():
            raise ValueError(
                f"'{path_text}' is a directory, not a file."
                " Please specify a CSV file within this directory."
            )
        raise ValueError(
            f"'{path_text}' exists but is not a regular file. Please specify a CSV file."
        )

    extension = _extension(file_path)
    if extension is None:
        print("⚠️  Warning: File has no extension.")
        print("   Proceeding anyway, but ensure this contains comma-separated values.")
    elif extension not in _CSV_EXTENSIONS:
        print(f"⚠️  Warning: File extension '{extension}' is not typical for CSV files.")
        print("   Proceeding anyway, but ensure this contains comma-separated values.")

    try:
        return str(file_path.resolve(strict=True))
    except OSError as error:
        raise ValueError(
            f"Cannot resolve absolute path for '{path_text}'."
            " Check file permissions and path validity."
        ) from error


def describe_csv_file(csv_path: str | Path) -> str:
    """Name, path and size of the CSV file about to be processed."""
    csv_path = Path(csv_path)
    try:
        size_bytes = csv_path.stat().st_size
    except OSError as error:
        raise FileSystemError(
            f"Failed to read file metadata for: {csv_path}", error
        ) from error

    name = csv_path.name or "unknown"
    lines = [
        "CSV File Information:",
        f"  Name: {name}",
        f"  Path: {csv_path}",
        f"  Size: {format_file_size(size_bytes)} ({size_bytes} bytes)",
        "  Type: CSV/Text file",
        "",
    ]
    return "\n".join(lines) + "\n"