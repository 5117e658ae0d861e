from .aggregate import aggregate_costs, sort_rows
from .colors import DEFAULT_PALETTE, assign_colors
from .formatting import format_label, format_tooltip_line, format_value
from .periods import normalize_period
from .pipeline import ChartData, build_chart_data, clear_chart_cache
from .state import CostState

__all__ = [
    "DEFAULT_PALETTE",
    "ChartData",
    "CostState",
    "aggregate_costs",
    "assign_colors",
    "build_chart_data",
    "clear_chart_cache",
    "format_label",
    "format_tooltip_line",
    "format_value",
    "normalize_period",
    "sort_rows",
]
