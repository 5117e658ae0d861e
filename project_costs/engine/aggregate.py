from __future__ import annotations

from typing import Any, Dict, List, Tuple

import pandas as pd

from ..data_model import FRAME_COLUMNS, RESERVED_PROJECT_NAMES, Granularity
from ..errors import InvalidCostRecord
from .periods import normalize_period

REQUIRED_COLUMNS = set(FRAME_COLUMNS)

PivotRow = Dict[str, Any]


def _prepare(df: pd.DataFrame, granularity: Granularity) -> pd.DataFrame:
    missing = REQUIRED_COLUMNS.difference(df.columns)
    if missing:
        raise KeyError(f"Missing required columns: {', '.join(sorted(missing))}")
    reserved = RESERVED_PROJECT_NAMES.intersection(df["projectName"])
    if reserved:
        raise InvalidCostRecord(f"Reserved project names: {', '.join(sorted(reserved))}")
    df = df[FRAME_COLUMNS].copy()
    df["period"] = df["period"].map(lambda period: normalize_period(period, granularity))
    return df


def sort_rows(rows: List[PivotRow]) -> List[PivotRow]:
    """Order pivot rows by canonical period key, oldest first."""
    return sorted(rows, key=lambda row: row["period"])


def aggregate_costs(
    df: pd.DataFrame,
    granularity: Granularity | str = Granularity.MONTH,
) -> Tuple[List[PivotRow], List[str]]:
    """Pivot per-project costs into one row per canonical period.

    Each row holds ``period`` plus the summed ``totalCost`` of every project
    that had at least one record in that period. Projects without cost in a
    period are left out of the row rather than set to zero.
    """
    if df.empty:
        return [], []

    df = _prepare(df, Granularity.parse(granularity))
    totals = df.groupby(["period", "projectName"], sort=False)["totalCost"].sum()

    rows: Dict[str, PivotRow] = {}
    for (period, project_name), total in totals.items():
        row = rows.setdefault(period, {"period": period})
        row[project_name] = float(total)

    project_names = sorted(str(name) for name in df["projectName"].unique())
    return sort_rows(list(rows.values())), project_names
