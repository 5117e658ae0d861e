import math

import pytest

from project_costs.data_model import (
    CostRecord,
    CostTableModel,
    Granularity,
    cost_record_from_mapping,
    parse_cost,
    parse_cost_records,
    records_to_frame,
)
from project_costs.errors import InvalidCostRecord


def test_record_from_camel_case_mapping():
    record = cost_record_from_mapping({"period": "2024-06", "projectName": " Apollo ", "totalCost": 100})

    assert record == CostRecord(period="2024-06", project_name="Apollo", total_cost=100.0)
    assert isinstance(record.total_cost, float)


def test_month_alias_and_snake_case_keys():
    record = cost_record_from_mapping({"month": "06/2024", "project_name": "Apollo", "total_cost": "1,250.50"})

    assert record == CostRecord("06/2024", "Apollo", 1250.5)


@pytest.mark.parametrize(
    "raw",
    [None, True, "abc", float("nan"), float("inf"), -1, [1]],
)
def test_bad_costs_are_rejected(raw):
    with pytest.raises(InvalidCostRecord):
        parse_cost(raw)


def test_string_costs_never_concatenate():
    assert parse_cost("0") + parse_cost("5") == 5.0


def test_missing_fields_are_rejected():
    with pytest.raises(InvalidCostRecord, match="period"):
        cost_record_from_mapping({"projectName": "A", "totalCost": 1})
    with pytest.raises(InvalidCostRecord, match="projectName"):
        cost_record_from_mapping({"period": "2024-01", "projectName": "  ", "totalCost": 1})
    with pytest.raises(InvalidCostRecord):
        cost_record_from_mapping(["2024-01", "A", 1])


def test_batch_errors_carry_row_index():
    rows = [
        {"period": "2024-01", "projectName": "A", "totalCost": 1},
        {"period": "2024-02", "projectName": "A", "totalCost": "oops"},
    ]

    with pytest.raises(InvalidCostRecord) as excinfo:
        parse_cost_records(rows)

    assert excinfo.value.index == 1
    assert str(excinfo.value).startswith("Record 1:")


def test_period_is_not_a_project_name():
    with pytest.raises(InvalidCostRecord, match="reserved"):
        CostRecord("2024-01", "period", 5.0)

    rows = [
        {"period": "2024-01", "projectName": "A", "totalCost": 1},
        {"period": "2024-02", "projectName": "period", "totalCost": 5},
    ]
    with pytest.raises(InvalidCostRecord) as excinfo:
        parse_cost_records(rows)

    assert excinfo.value.index == 1


def test_empty_batch():
    assert parse_cost_records(None) == []
    assert parse_cost_records([]) == []


def test_records_to_frame_columns():
    df = records_to_frame([CostRecord("2024-01", "A", 2.0)])

    assert list(df.columns) == ["period", "projectName", "totalCost"]
    assert df["totalCost"].dtype.kind == "f"
    assert records_to_frame([]).empty


def test_granularity_parse():
    assert Granularity.parse("Month") is Granularity.MONTH
    assert Granularity.parse("Y") is Granularity.YEAR
    assert Granularity.parse(Granularity.YEAR) is Granularity.YEAR
    assert Granularity.YEAR.label == "Year"
    with pytest.raises(ValueError):
        Granularity.parse("quarter")


def test_cost_table_model_defaults_parse_cleanly():
    model = CostTableModel()

    rows = model.create_default_df().to_dict("records")
    records = parse_cost_records(rows)

    assert [col.field for col in model.columns] == ["period", "projectName", "totalCost"]
    assert all(math.isfinite(record.total_cost) for record in records)
    assert model.blank_row() == {"period": "", "projectName": "", "totalCost": 0.0}
