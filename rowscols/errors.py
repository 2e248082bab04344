"""Exception hierarchy for CSV analysis, metadata handling and reporting."""

from __future__ import annotations


class RowsAndColumnsError(Exception):
    """Base class for every error raised by the package."""


class FileSystemError(RowsAndColumnsError):
    """A file system operation (read, write, directory creation) failed."""

    def __init__(self, operation_description: str, source_error: BaseException) -> None:
        self.operation_description = operation_description
        self.source_error = source_error
        super().__init__(
            f"File system operation failed: {operation_description}"
            f" - Underlying error: {source_error}"
        )
        self.__cause__ = source_error


class CsvProcessingError(RowsAndColumnsError):
    """Parsing or processing a CSV file failed."""

    def __init__(
        self,
        csv_operation_description: str,
        csv_line_number: int | None = None,
        csv_column_identifier: str | None = None,
    ) -> None:
        self.csv_operation_description = csv_operation_description
        self.csv_line_number = csv_line_number
        self.csv_column_identifier = csv_column_identifier
        line_info = f" at line {csv_line_number}" if csv_line_number is not None else ""
        column_info = (
            f" in column '{csv_column_identifier}'"
            if csv_column_identifier is not None
            else ""
        )
        super().__init__(
            f"CSV processing failed: {csv_operation_description}{line_info}{column_info}"
        )


class MetadataError(RowsAndColumnsError):
    """Reading, writing or validating a metadata TOML file failed."""

    def __init__(self, metadata_operation_description: str, metadata_file_path: str) -> None:
        self.metadata_operation_description = metadata_operation_description
        self.metadata_file_path = str(metadata_file_path)
        super().__init__(
            f"Metadata operation failed: {metadata_operation_description}"
            f" for file: {self.metadata_file_path}"
        )


class StatisticalAnalysisError(RowsAndColumnsError):
    """A statistical calculation could not be completed."""

    def __init__(
        self, analysis_operation_description: str, column_name_being_analyzed: str
    ) -> None:
        self.analysis_operation_description = analysis_operation_description
        self.column_name_being_analyzed = column_name_being_analyzed
        super().__init__(
            f"Statistical analysis failed: {analysis_operation_description}"
            f" for column '{column_name_being_analyzed}'"
        )


class TuiRenderingError(RowsAndColumnsError):
    """Rendering the terminal interface failed."""

    def __init__(self, tui_operation_description: str) -> None:
        self.tui_operation_description = tui_operation_description
        super().__init__(f"TUI rendering failed: {tui_operation_description}")


class DataTypeValidationError(RowsAndColumnsError):
    """A value could not be validated or converted to the expected type."""

    def __init__(
        self,
        data_type_operation_description: str,
        invalid_value: str,
        expected_data_type: str,
    ) -> None:
        self.data_type_operation_description = data_type_operation_description
        self.invalid_value = invalid_value
        self.expected_data_type = expected_data_type
        super().__init__(
            f"Data type validation failed: {data_type_operation_description}"
            f" - Value '{invalid_value}' is not a valid {expected_data_type}"
        )


class ConfigurationError(RowsAndColumnsError):
    """Setup or configuration is invalid."""

    def __init__(self, configuration_issue_description: str) -> None:
        self.configuration_issue_description = configuration_issue_description
        super().__init__(f"Configuration error: {configuration_issue_description}")