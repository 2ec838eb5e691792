from .types import AxisDomain, Bin, ExtractionReport, FiveNumberSummary, FrequencyEntry, ScatterPoint
from .values import (
    UNKNOWN_LABEL,
    to_number,
    to_label,
    numeric_values,
    categorical_values,
    numeric_with_labels,
    extraction_report,
)
from .groups import resolve_groups
from .binning import histogram_bins, grouped_histogram_bins
from .five_number import five_number_summary, grouped_five_number_summary, pooled_summary_values
from .frequency import OTHER_LABEL, frequency_table, cross_tabulate
from .pairs import scatter_points, points_by_group
from .axis import axis_domain, decimal_places, format_axis_label

__all__ = [
    "AxisDomain", "Bin", "ExtractionReport", "FiveNumberSummary", "FrequencyEntry", "ScatterPoint",
    "UNKNOWN_LABEL", "OTHER_LABEL",
    "to_number", "to_label", "numeric_values", "categorical_values", "numeric_with_labels",
    "extraction_report", "resolve_groups",
    "histogram_bins", "grouped_histogram_bins",
    "five_number_summary", "grouped_five_number_summary", "pooled_summary_values",
    "frequency_table", "cross_tabulate",
    "scatter_points", "points_by_group",
    "axis_domain", "decimal_places", "format_axis_label",
]
