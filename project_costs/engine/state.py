# engine/state.py
from typing import List

from ..data_model import CostRecord


class CostState:
    """Holds the current batch of cost records in process memory."""

    def __init__(self, records: List[CostRecord] | None = None):
        self.records: tuple[CostRecord, ...] = tuple(records or ())

    def replace(self, records: List[CostRecord]) -> None:
        self.records = tuple(records)

    def clear(self) -> None:
        self.records = ()

    def get(self) -> tuple[CostRecord, ...]:
        return self.records

    def list_project_names(self) -> List[str]:
        return sorted({record.project_name for record in self.records})
