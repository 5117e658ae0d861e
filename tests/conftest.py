from __future__ import annotations

import pytest

from project_costs.engine.pipeline import clear_chart_cache


@pytest.fixture(autouse=True)
def _fresh_chart_cache():
    clear_chart_cache()
    yield
    clear_chart_cache()
