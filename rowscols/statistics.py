"""Descriptive statistics for analysed CSV columns."""

from __future__ import annotations

import enum
import math
from collections import Counter
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from rowscols.analysis import (
    CsvAnalysisResults,
    CsvColumnDataType,
    CsvColumnInformation,
    split_csv_line,
)
from rowscols.errors import CsvProcessingError, FileSystemError

DISPLAY_VALUE_LIMIT = 5
_RULE = "═" * 63


class CsvFieldType(enum.Enum):
    """Whether a column is analysed as categories or as continuous numbers."""

    CATEGORICAL = "categorical"
    CONTINUOUS = "continuous"

    def __str__(self) -> str:
        return self.value


@dataclass
class NumericalColumnStatistics:
    """Summary measures of a continuous column."""

    min_value: float
    q1_value: float
    q2_median_value: float
    q3_value: float
    max_value: float
    mean_value: float
    standard_deviation: float
    missing_percentage: float


@dataclass
class CategoricalValueFrequency:
    """How often one value occurs among the non-empty values of a column."""

    value: str
    count: int
    percentage: float


@dataclass
class CategoricalColumnStatistics:
    """Value distribution of a categorical column."""

    unique_value_count: int
    value_frequencies: list[CategoricalValueFrequency]
    missing_percentage: float
    mode_value: str | None
    mode_percentage: float


@dataclass
class EnhancedCsvColumnInformation:
    """Basic column information together with its statistics."""

    basic_info: CsvColumnInformation
    field_type: CsvFieldType
    numerical_statistics: NumericalColumnStatistics | None = None
    categorical_statistics: CategoricalColumnStatistics | None = None


def field_type_for(data_type: CsvColumnDataType) -> CsvFieldType:
    """Numbers are continuous; booleans and strings are categorical."""
    if data_type in (CsvColumnDataType.INTEGER, CsvColumnDataType.FLOAT):
        return CsvFieldType.CONTINUOUS
    return CsvFieldType.CATEGORICAL


def percentile(sorted_values: Sequence[float], percent: float) -> float:
    """Linearly interpolated percentile (0-100) of already sorted values."""
    if not sorted_values:
        return 0.0
    position = (percent / 100.0) * (len(sorted_values) - 1)
    lower = math.floor(position)
    upper = math.ceil(position)
    if lower == upper:
        return sorted_values[lower]
    weight = position - lower
    return sorted_values[lower] * (1.0 - weight) + sorted_values[upper] * weight


def _parse_float(text: str) -> float | None:
    if not text or not text.isascii() or "_" in text or text != text.strip():
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _missing_percentage(missing: int, total: int) -> float:
    return (missing / total) * 100.0 if total else 0.0


def calculate_numerical_statistics(values: Sequence[str]) -> NumericalColumnStatistics:
    """Describe a column of numbers; unparseable values count as missing."""
    numbers: list[float] = []
    missing = 0
    for raw in values:
        number = _parse_float(raw.strip())
        if number is None:
            missing += 1
        else:
            numbers.append(number)

    if not numbers:
        raise CsvProcessingError(
            "No valid numerical values found for statistical analysis"
        )

    numbers.sort()
    mean = sum(numbers) / len(numbers)
    variance = sum((number - mean) ** 2 for number in numbers) / len(numbers)

    return NumericalColumnStatistics(
        min_value=numbers[0],
        q1_value=percentile(numbers, 25.0),
        q2_median_value=percentile(numbers, 50.0),
        q3_value=percentile(numbers, 75.0),
        max_value=numbers[-1],
        mean_value=mean,
        standard_deviation=math.sqrt(variance),
        missing_percentage=_missing_percentage(missing, len(values)),
    )


def calculate_categorical_statistics(
    values: Sequence[str],
) -> CategoricalColumnStatistics:
    """Count each distinct non-empty value, most frequent first."""
    stripped = [raw.strip() for raw in values]
    counts = Counter(value for value in stripped if value)
    missing = len(stripped) - sum(counts.values())
    non_empty_total = sum(counts.values())

    frequencies = sorted(
        (
            CategoricalValueFrequency(
                value=value,
                count=count,
                percentage=(count / non_empty_total) * 100.0 if non_empty_total else 0.0,
            )
            for value, count in counts.items()
        ),
        key=lambda frequency: frequency.count,
        reverse=True,
    )

    mode = frequencies[0] if frequencies else None
    return CategoricalColumnStatistics(
        unique_value_count=len(counts),
        value_frequencies=frequencies,
        missing_percentage=_missing_percentage(missing, len(values)),
        mode_value=mode.value if mode else None,
        mode_percentage=mode.percentage if mode else 0.0,
    )


def _read_data_lines(csv_path: Path, has_header_row: bool) -> Iterator[str]:
    try:
        handle = open(csv_path, encoding="utf-8", newline="\n")
    except OSError as error:
        raise FileSystemError(
            f"Failed to open CSV file for enhanced analysis: {csv_path}", error
        ) from error
    with handle:
        try:
            lines = iter(handle)
            if has_header_row:
                next(lines, None)
            for raw in lines:
                if raw.endswith("\n"):
                    raw = raw[:-1]
                    if raw.endswith("\r"):
                        raw = raw[:-1]
                yield raw
        except (OSError, UnicodeDecodeError) as error:
            raise FileSystemError(
                "Failed to read CSV line during enhanced analysis", error
            ) from error


def collect_column_values(
    csv_path: str | Path, has_header_row: bool, column_count: int
) -> list[list[str]]:
    """Read every data row and return the trimmed values of each column."""
    columns: list[list[str]] = [[] for _ in range(column_count)]
    for line in _read_data_lines(Path(csv_path), has_header_row):
        for column, value in zip(columns, split_csv_line(line)):
            column.append(value.strip())
    return columns


def perform_enhanced_statistical_analysis(
    csv_path: str | Path, analysis: CsvAnalysisResults
) -> list[EnhancedCsvColumnInformation]:
    """Compute statistics for every column described by ``analysis``."""
    print("📊 Performing enhanced statistical analysis...")
    all_values = collect_column_values(
        csv_path, analysis.has_header_row, analysis.total_column_count
    )

    results = []
    for column in analysis.columns:
        values = all_values[column.column_index]
        field_type = field_type_for(column.detected_data_type)
        if field_type is CsvFieldType.CONTINUOUS:
            enhanced = EnhancedCsvColumnInformation(
                basic_info=column,
                field_type=field_type,
                numerical_statistics=calculate_numerical_statistics(values),
            )
        else:
            enhanced = EnhancedCsvColumnInformation(
                basic_info=column,
                field_type=field_type,
                categorical_statistics=calculate_categorical_statistics(values),
            )
        results.append(enhanced)

    print("  ✓ Enhanced statistical analysis complete")
    return results


def _numerical_lines(stats: NumericalColumnStatistics) -> list[str]:
    return [
        "   Field-type: continuous",
        f"   min: {stats.min_value:.3f}    q1: {stats.q1_value:.3f}"
        f"    q2: {stats.q2_median_value:.3f}    q3: {stats.q3_value:.3f}"
        f"    max: {stats.max_value:.3f}",
        f"   mean: {stats.mean_value:.3f}    stdev: {stats.standard_deviation:.3f}",
        f"   %missing: {stats.missing_percentage:.1f}%",
    ]


def _categorical_lines(stats: CategoricalColumnStatistics) -> list[str]:
    lines = [
        "   Field-type: categorical",
        f"   Unique values: {stats.unique_value_count}",
        f"   %missing: {stats.missing_percentage:.1f}%",
    ]
    if stats.mode_value is not None:
        lines.append(f"   Mode: {stats.mode_value} ({stats.mode_percentage:.1f}%)")
    lines.append("   Value Distribution:")
    shown = stats.value_frequencies[:DISPLAY_VALUE_LIMIT]
    lines.extend(
        f"     {frequency.value}: {frequency.percentage:.1f}% ({frequency.count} values)"
        for frequency in shown
    )
    if len(stats.value_frequencies) > len(shown):
        lines.append(
            f"     ... (showing top {len(shown)} of {stats.unique_value_count}"
            " unique values)"
        )
    return lines


def format_enhanced_analysis(columns: Sequence[EnhancedCsvColumnInformation]) -> str:
    """Render the statistics report as text."""
    lines = [_RULE, "  Enhanced CSV Analysis Results", _RULE, ""]
    for number, column in enumerate(columns, start=1):
        info = column.basic_info
        lines.append(
            f"{number}. {info.column_name}"
            f" ({info.detected_data_type.value} - {column.field_type.value})"
        )
        if column.field_type is CsvFieldType.CONTINUOUS:
            if column.numerical_statistics is not None:
                lines.extend(_numerical_lines(column.numerical_statistics))
        elif column.categorical_statistics is not None:
            lines.extend(_categorical_lines(column.categorical_statistics))
        lines.append("")
    lines.extend([_RULE, ""])
    return "\n".join(lines) + "\n"


def display_enhanced_analysis(columns: Sequence[EnhancedCsvColumnInformation]) -> None:
    """Print the statistics report."""
    print(format_enhanced_analysis(columns), end="")