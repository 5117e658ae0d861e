from .base import ColumnDefinition, TableModel
from .costs import (
    FRAME_COLUMNS,
    GROUP_BY_OPTIONS,
    RESERVED_PROJECT_NAMES,
    CostRecord,
    CostTableModel,
    Granularity,
    cost_record_from_mapping,
    parse_cost,
    parse_cost_records,
    records_to_frame,
)

__all__ = [
    "FRAME_COLUMNS",
    "GROUP_BY_OPTIONS",
    "RESERVED_PROJECT_NAMES",
    "ColumnDefinition",
    "CostRecord",
    "CostTableModel",
    "Granularity",
    "TableModel",
    "cost_record_from_mapping",
    "parse_cost",
    "parse_cost_records",
    "records_to_frame",
]
