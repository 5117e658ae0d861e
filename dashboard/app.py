"""Dash dashboard rendering project costs as a stacked bar chart.

Env
- PROJECT_COSTS_SOURCE_URL: statistics endpoint to read cost records from
- PROJECT_COSTS_DASH_PORT (optional): default 8050
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Sequence, Tuple

import dash
import dash_bootstrap_components as dbc
import plotly.graph_objects as go
from dash import Input, Output, html

from dashboard.chart import (
    ERROR_TEXT,
    GRAPH_ID,
    GROUP_BY_ID,
    REFRESH_ID,
    STATUS_ID,
    STORE_ID,
    TITLE_ID,
    build_chart_card,
    build_figure,
    chart_title,
)
from project_costs.client import StatisticsClient
from project_costs.config import Settings
from project_costs.data_model import CostRecord, Granularity, parse_cost_records
from project_costs.engine.colors import DEFAULT_PALETTE
from project_costs.engine.pipeline import build_chart_data
from project_costs.errors import ProjectCostsError
from project_costs.logging_setup import configure_logging, get_logger

logger = get_logger(__name__)

FetchCosts = Callable[[], List[CostRecord]]


def load_costs(fetch: FetchCosts) -> Tuple[List[Dict[str, Any]] | None, str]:
    """Fetch the batch for the store; returns ``(records, status text)``."""
    try:
        records = fetch()
    except ProjectCostsError as exc:
        logger.error("Error fetching project costs: %s", exc)
        return None, ERROR_TEXT
    return [record.to_payload() for record in records], ""


def render_chart(
    stored: List[Dict[str, Any]] | None,
    group_by: str | None,
    palette: Sequence[str] = DEFAULT_PALETTE,
) -> Tuple[go.Figure, str]:
    granularity = Granularity.parse(group_by or Granularity.MONTH.value)
    records = parse_cost_records(stored or [])
    chart = build_chart_data(records, granularity, palette)
    return build_figure(chart), chart_title(granularity)


def create_app(fetch: FetchCosts | None = None, settings: Settings | None = None) -> dash.Dash:
    settings = settings or Settings.from_env()
    if fetch is None:
        fetch = StatisticsClient.from_settings(settings).get_project_costs

    app = dash.Dash(__name__, external_stylesheets=[dbc.themes.DARKLY])
    app.title = "Project Costs"
    app.layout = dbc.Container([html.Div(build_chart_card(), className="my-4")], fluid=True)

    @app.callback(
        Output(STORE_ID, "data"),
        Output(STATUS_ID, "children"),
        Input(REFRESH_ID, "n_clicks"),
    )
    def refresh_costs(_n_clicks):
        return load_costs(fetch)

    @app.callback(
        Output(GRAPH_ID, "figure"),
        Output(TITLE_ID, "children"),
        Input(STORE_ID, "data"),
        Input(GROUP_BY_ID, "value"),
    )
    def update_chart(stored, group_by):
        return render_chart(stored, group_by, settings.palette)

    return app


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    app = create_app(settings=settings)
    app.run(debug=settings.debug, port=settings.dash_port)


if __name__ == "__main__":
    main()
