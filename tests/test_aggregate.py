import pandas as pd
import pytest

from project_costs.data_model import CostRecord, Granularity, records_to_frame
from project_costs.engine.aggregate import aggregate_costs, sort_rows
from project_costs.errors import InvalidCostRecord


def _frame(*rows):
    return records_to_frame(CostRecord(*row) for row in rows)


def test_both_period_shapes_merge_into_one_month_row():
    df = _frame(("06/2024", "A", 100.0), ("2024-06", "A", 50.0))

    rows, names = aggregate_costs(df, Granularity.MONTH)

    assert rows == [{"period": "2024-06", "A": 150.0}]
    assert names == ["A"]


def test_year_granularity_sums_across_months():
    df = _frame(("06/2024", "A", 100.0), ("2024-06", "A", 50.0))

    rows, _ = aggregate_costs(df, Granularity.YEAR)

    assert rows == [{"period": "2024", "A": 150.0}]


def test_rows_are_chronological_and_missing_projects_absent():
    df = _frame(
        ("2024-01", "Beta", 10.0),
        ("12/2023", "Alpha", 5.0),
        ("2024-01", "Alpha", 7.0),
        ("2023-11", "Beta", 1.0),
    )

    rows, names = aggregate_costs(df, "month")

    assert [row["period"] for row in rows] == ["2023-11", "2023-12", "2024-01"]
    assert rows[0] == {"period": "2023-11", "Beta": 1.0}
    assert "Beta" not in rows[1]
    assert rows[2] == {"period": "2024-01", "Beta": 10.0, "Alpha": 7.0}
    assert names == ["Alpha", "Beta"]


def test_project_totals_are_conserved():
    records = [
        CostRecord("01/2024", "A", 10.5),
        CostRecord("2024-02", "B", 3.0),
        CostRecord("2024-02", "A", 4.5),
        CostRecord("Q3", "A", 1.0),
        CostRecord("2023-07", "B", 2.0),
    ]

    for granularity in Granularity:
        rows, names = aggregate_costs(records_to_frame(records), granularity)
        for name in names:
            expected = sum(r.total_cost for r in records if r.project_name == name)
            assert sum(row.get(name, 0.0) for row in rows) == pytest.approx(expected)


def test_month_rows_survive_a_year_round_trip():
    df = _frame(("2023-12", "A", 1.0), ("01/2024", "B", 2.0), ("2024-01", "A", 3.0))

    before, _ = aggregate_costs(df, Granularity.MONTH)
    aggregate_costs(df, Granularity.YEAR)
    after, _ = aggregate_costs(df, Granularity.MONTH)

    assert before == after


def test_empty_frame_yields_nothing():
    assert aggregate_costs(records_to_frame([]), Granularity.MONTH) == ([], [])


def test_input_frame_is_not_modified():
    df = _frame(("06/2024", "A", 1.0))

    aggregate_costs(df, Granularity.YEAR)

    assert df["period"].tolist() == ["06/2024"]


def test_missing_columns_raise_key_error():
    with pytest.raises(KeyError, match="totalCost"):
        aggregate_costs(pd.DataFrame([{"period": "2024-01", "projectName": "A"}]))


def test_period_project_cannot_overwrite_row_label():
    df = pd.DataFrame(
        [
            {"period": "2024-01", "projectName": "period", "totalCost": 5.0},
            {"period": "2024-02", "projectName": "A", "totalCost": 1.0},
        ]
    )

    with pytest.raises(InvalidCostRecord, match="period"):
        aggregate_costs(df)


def test_sort_rows_uses_plain_text_order():
    rows = [{"period": "2024"}, {"period": "2023"}, {"period": "Backlog"}, {"period": "2023-12"}]

    assert [row["period"] for row in sort_rows(rows)] == ["2023", "2023-12", "2024", "Backlog"]
