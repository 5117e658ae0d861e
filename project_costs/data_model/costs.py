from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Mapping, Sequence

import pandas as pd

from ..errors import InvalidCostRecord
from .base import ColumnDefinition, TableModel

FRAME_COLUMNS = ["period", "projectName", "totalCost"]

# Pivot rows keep their period label under this key, next to project totals.
RESERVED_PROJECT_NAMES = frozenset({"period"})

# Accepted spellings per field, first match wins. The statistics endpoint
# historically named the period field "month".
PERIOD_FIELDS = ("period", "month")
PROJECT_FIELDS = ("projectName", "project_name", "project")
COST_FIELDS = ("totalCost", "total_cost", "cost")


class Granularity(str, Enum):
    MONTH = "month"
    YEAR = "year"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: "Granularity | str | None") -> "Granularity":
        if isinstance(value, Granularity):
            return value
        text = str(value or "").strip().lower()
        if text in {"month", "m", "monthly"}:
            return cls.MONTH
        if text in {"year", "y", "yearly"}:
            return cls.YEAR
        raise ValueError(f"Unknown granularity: {value!r} (expected 'month' or 'year')")


GROUP_BY_OPTIONS = [{"label": g.label, "value": g.value} for g in Granularity]


@dataclass(frozen=True)
class CostRecord:
    period: str
    project_name: str
    total_cost: float

    def __post_init__(self) -> None:
        if self.project_name in RESERVED_PROJECT_NAMES:
            raise InvalidCostRecord(f"projectName {self.project_name!r} is reserved")

    def to_payload(self) -> dict[str, Any]:
        return {
            "period": self.period,
            "projectName": self.project_name,
            "totalCost": self.total_cost,
        }


def _first_present(row: Mapping[str, Any], keys: Iterable[str]) -> Any:
    for key in keys:
        if key in row and row[key] is not None:
            return row[key]
    return None


def parse_cost(raw: Any) -> float:
    """Coerce a raw cost into a finite, non-negative float."""
    if isinstance(raw, bool) or raw is None:
        raise InvalidCostRecord(f"totalCost must be numeric, got {raw!r}")
    if isinstance(raw, str):
        cleaned = raw.strip().replace("$", "").replace(",", "").replace(" ", "")
        try:
            value = float(cleaned)
        except ValueError:
            raise InvalidCostRecord(f"totalCost must be numeric, got {raw!r}") from None
    else:
        try:
            value = float(raw)
        except (TypeError, ValueError):
            raise InvalidCostRecord(f"totalCost must be numeric, got {raw!r}") from None
    if not math.isfinite(value):
        raise InvalidCostRecord(f"totalCost must be finite, got {raw!r}")
    if value < 0:
        raise InvalidCostRecord(f"totalCost must not be negative, got {raw!r}")
    return value


def cost_record_from_mapping(row: Mapping[str, Any]) -> CostRecord:
    if not isinstance(row, Mapping):
        raise InvalidCostRecord(f"expected an object, got {type(row).__name__}")
    period = str(_first_present(row, PERIOD_FIELDS) or "").strip()
    if not period:
        raise InvalidCostRecord("period is required")
    name = str(_first_present(row, PROJECT_FIELDS) or "").strip()
    if not name:
        raise InvalidCostRecord("projectName is required")
    cost = parse_cost(_first_present(row, COST_FIELDS))
    return CostRecord(period=period, project_name=name, total_cost=cost)


def parse_cost_records(rows: Sequence[Mapping[str, Any]] | None) -> List[CostRecord]:
    """Validate a raw batch, reporting the index of the first bad row."""
    records: List[CostRecord] = []
    for index, row in enumerate(rows or []):
        try:
            records.append(cost_record_from_mapping(row))
        except InvalidCostRecord as exc:
            raise InvalidCostRecord(str(exc), index=index) from exc
    return records


def records_to_frame(records: Iterable[CostRecord]) -> pd.DataFrame:
    rows = [record.to_payload() for record in records]
    if not rows:
        return pd.DataFrame(columns=FRAME_COLUMNS)
    df = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    df["totalCost"] = df["totalCost"].astype(float)
    return df


def _cost_defaults() -> List[dict[str, float | str]]:
    return [
        {"period": "2024-01", "projectName": "Website Redesign", "totalCost": 12000.0},
        {"period": "2024-01", "projectName": "Mobile App", "totalCost": 8500.0},
        {"period": "02/2024", "projectName": "Website Redesign", "totalCost": 9400.0},
    ]


class CostTableModel(TableModel):
    """Schema + defaults for per-project, per-period cost rows."""

    def __init__(self) -> None:
        columns = [
            ColumnDefinition("period", "Period", help="YYYY-MM or MM/YYYY"),
            ColumnDefinition("projectName", "Project"),
            ColumnDefinition(
                "totalCost",
                "Total Cost",
                kind="number",
                default=0.0,
                min_value=0.0,
                step=100.0,
                format="%.2f",
            ),
        ]
        super().__init__("projectCosts", columns, _cost_defaults())
