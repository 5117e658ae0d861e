"""Glue from a batch of cost records to chart-ready data.

Every call recomputes from the raw batch; results are memoized on the batch
contents and granularity, and rows are copied out so the cache stays intact.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from ..data_model import CostRecord, Granularity, records_to_frame
from ..logging_setup import get_logger
from .aggregate import PivotRow, aggregate_costs
from .colors import DEFAULT_PALETTE, assign_colors

logger = get_logger(__name__)


@dataclass(frozen=True)
class ChartData:
    granularity: Granularity
    rows: List[PivotRow]
    project_names: List[str]
    colors: Dict[str, str]

    def to_payload(self) -> Dict[str, Any]:
        return {
            "groupBy": self.granularity.value,
            "rows": [dict(row) for row in self.rows],
            "projectNames": list(self.project_names),
            "colors": dict(self.colors),
        }


@lru_cache(maxsize=32)
def _build_cached(
    records: Tuple[CostRecord, ...],
    granularity: Granularity,
    palette: Tuple[str, ...],
) -> Tuple[Tuple[PivotRow, ...], Tuple[str, ...], Tuple[Tuple[str, str], ...]]:
    rows, project_names = aggregate_costs(records_to_frame(records), granularity)
    colors = assign_colors(project_names, palette)
    logger.debug(
        "Aggregated %d cost records into %d %s periods across %d projects",
        len(records),
        len(rows),
        granularity.value,
        len(project_names),
    )
    return tuple(rows), tuple(project_names), tuple(colors.items())


def build_chart_data(
    records: Iterable[CostRecord],
    granularity: Granularity | str = Granularity.MONTH,
    palette: Sequence[str] = DEFAULT_PALETTE,
) -> ChartData:
    granularity = Granularity.parse(granularity)
    rows, project_names, colors = _build_cached(tuple(records), granularity, tuple(palette))
    return ChartData(
        granularity=granularity,
        rows=[dict(row) for row in rows],
        project_names=list(project_names),
        colors=dict(colors),
    )


def clear_chart_cache() -> None:
    _build_cached.cache_clear()
