"""Project cost aggregation and chart data shaping."""

from .data_model import CostRecord, Granularity
from .engine.pipeline import ChartData, build_chart_data

__all__ = [
    "ChartData",
    "CostRecord",
    "Granularity",
    "build_chart_data",
]
