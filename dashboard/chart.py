# dashboard/chart.py
from __future__ import annotations

import dash_bootstrap_components as dbc
import plotly.graph_objects as go
from dash import dcc, html

from project_costs.data_model import GROUP_BY_OPTIONS, Granularity
from project_costs.engine.formatting import format_label, format_tooltip_line
from project_costs.engine.pipeline import ChartData

LOADING_TEXT = "Loading project costs..."
ERROR_TEXT = "Failed to fetch project costs"

STORE_ID = "project-costs-store"
STATUS_ID = "project-costs-status"
GROUP_BY_ID = "group-by"
GRAPH_ID = "project-costs-graph"
TITLE_ID = "project-costs-title"
REFRESH_ID = "project-costs-refresh"

# Inline label rotation per granularity; month charts have narrow bars.
LABEL_ANGLE = {Granularity.MONTH: -90, Granularity.YEAR: 0}


def chart_title(granularity: Granularity | str) -> str:
    return f"Project Costs by {Granularity.parse(granularity).label}"


def build_figure(chart: ChartData) -> go.Figure:
    """Stacked bar chart: one category per period, one trace per project."""
    periods = [row["period"] for row in chart.rows]
    fig = go.Figure()
    for name in chart.project_names:
        # Missing periods stay None and render as zero-height segments.
        values = [row.get(name) for row in chart.rows]
        fig.add_trace(
            go.Bar(
                name=name,
                x=periods,
                y=values,
                marker_color=chart.colors.get(name),
                text=[format_label(value) for value in values],
                textposition="inside",
                textangle=LABEL_ANGLE[chart.granularity],
                textfont=dict(size=12, color="white"),
                customdata=[format_tooltip_line(name, value) for value in values],
                hovertemplate="Period: %{x}<br>%{customdata}<extra></extra>",
            )
        )

    fig.update_layout(
        barmode="stack",
        template="plotly_dark",
        margin=dict(t=20, r=30, l=20, b=5),
        legend=dict(orientation="h", yanchor="top", y=-0.1),
        hoverlabel=dict(namelength=-1),
        height=400,
    )
    fig.update_xaxes(type="category", categoryorder="array", categoryarray=periods)
    fig.update_yaxes(gridcolor="#444", griddash="dash")
    return fig


def build_chart_card():
    return dbc.Card(
        [
            html.Div(
                [
                    html.H3(chart_title(Granularity.MONTH), id=TITLE_ID, className="card-title"),
                    html.Div(
                        [
                            dbc.Label("Group by:", html_for=GROUP_BY_ID, className="me-2"),
                            dcc.Dropdown(
                                id=GROUP_BY_ID,
                                options=GROUP_BY_OPTIONS,
                                value=Granularity.MONTH.value,
                                clearable=False,
                                style={"minWidth": "140px"},
                            ),
                            dbc.Button("Refresh", id=REFRESH_ID, color="secondary", size="sm", className="ms-2"),
                        ],
                        className="d-flex align-items-center",
                    ),
                ],
                className="d-flex justify-content-between align-items-center mb-4",
            ),
            html.Div(LOADING_TEXT, id=STATUS_ID, className="text-muted"),
            dcc.Store(id=STORE_ID),
            dcc.Graph(id=GRAPH_ID, figure=go.Figure(), style={"height": "400px"}),
        ],
        body=True,
    )


__all__ = [
    "ERROR_TEXT",
    "GRAPH_ID",
    "GROUP_BY_ID",
    "LOADING_TEXT",
    "REFRESH_ID",
    "STATUS_ID",
    "STORE_ID",
    "TITLE_ID",
    "build_chart_card",
    "build_figure",
    "chart_title",
]
