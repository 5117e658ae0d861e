from project_costs.data_model import Granularity
from project_costs.engine.periods import normalize_period


def test_slash_form_rewritten_to_year_month():
    assert normalize_period("06/2024", Granularity.MONTH) == "2024-06"


def test_dash_form_kept_for_month_granularity():
    assert normalize_period("2024-06", Granularity.MONTH) == "2024-06"


def test_year_granularity_reduces_both_forms():
    assert normalize_period("2024-06", Granularity.YEAR) == "2024"
    assert normalize_period("06/2024", Granularity.YEAR) == "2024"


def test_granularity_accepts_text():
    assert normalize_period("12/2023", "year") == "2023"
    assert normalize_period("12/2023", "M") == "2023-12"


def test_unrecognised_labels_pass_through():
    assert normalize_period("Q1 2024", Granularity.MONTH) == "Q1 2024"
    assert normalize_period("Q1 2024", Granularity.YEAR) == "Q1 2024"
    assert normalize_period("6/2024", Granularity.MONTH) == "6/2024"
    assert normalize_period("2024-6", Granularity.YEAR) == "2024-6"
    assert normalize_period("2024", Granularity.YEAR) == "2024"


def test_partial_matches_are_not_rewritten():
    assert normalize_period("06/2024 ", Granularity.MONTH) == "06/2024 "
    assert normalize_period("x2024-06", Granularity.YEAR) == "x2024-06"
