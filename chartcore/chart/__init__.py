from .palette import DEFAULT_PALETTE, ALL_SERIES, assign_colors
from .variables import ChartKind, VariableDescriptor, eligible_variables, group_candidates
from .requests import ChartRequest, ChartData, build_chart_data

__all__ = [
    "DEFAULT_PALETTE", "ALL_SERIES", "assign_colors",
    "ChartKind", "VariableDescriptor", "eligible_variables", "group_candidates",
    "ChartRequest", "ChartData", "build_chart_data",
]
