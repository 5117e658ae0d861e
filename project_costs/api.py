"""REST backend serving project cost statistics and chart data."""

from __future__ import annotations

import math
from typing import Any, Dict, List

from flask import Flask, jsonify, request

from project_costs.config import Settings
from project_costs.data_model import GROUP_BY_OPTIONS, CostTableModel, Granularity, parse_cost_records
from project_costs.engine.pipeline import build_chart_data
from project_costs.engine.state import CostState
from project_costs.errors import InvalidCostRecord
from project_costs.logging_setup import configure_logging, get_logger

logger = get_logger(__name__)

app = Flask(__name__)

settings = Settings.from_env()
state = CostState()

COST_MODEL = CostTableModel()


def _is_nan(value: Any) -> bool:
    try:
        return not math.isfinite(value)
    except (TypeError, ValueError):
        return False


def _sanitize_records(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    clean_rows: List[Dict[str, Any]] = []
    for row in records:
        clean_rows.append({key: (None if _is_nan(value) else value) for key, value in row.items()})
    return clean_rows


def _model_payload(model: CostTableModel) -> Dict[str, Any]:
    return {
        "name": model.name,
        "columns": [col.to_payload() for col in model.columns],
        "defaults": _sanitize_records(model.create_default_df().to_dict("records")),
    }


def _extract_payload_value(payload: dict, *keys: str, default=None):
    for key in keys:
        if key in payload and payload[key] is not None:
            return payload[key]
    return default


def _extract_rows(payload: Any) -> Any:
    if isinstance(payload, dict):
        return _extract_payload_value(payload, "records", "costs", "data", default=[])
    return payload


def _chart_payload(records, granularity: Granularity) -> Dict[str, Any]:
    chart = build_chart_data(records, granularity, settings.palette)
    payload = chart.to_payload()
    payload["rows"] = _sanitize_records(payload["rows"])
    return payload


@app.after_request
def apply_cors_headers(response):
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "GET,POST,PUT,DELETE,OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type,Authorization"
    return response


@app.errorhandler(InvalidCostRecord)
def invalid_record(exc: InvalidCostRecord):
    logger.warning("Rejected project cost batch: %s", exc)
    return jsonify({"error": str(exc), "index": exc.index}), 400


@app.get("/api/health")
def healthcheck():
    return jsonify({"status": "ok"})


@app.get("/api/schema")
def get_schema():
    return jsonify(
        {
            "projectCosts": _model_payload(COST_MODEL),
            "groupByOptions": GROUP_BY_OPTIONS,
            "defaultGroupBy": Granularity.MONTH.value,
        }
    )


@app.get("/api/statistics/project-costs")
def get_project_costs():
    return jsonify(_sanitize_records([record.to_payload() for record in state.get()]))


@app.put("/api/statistics/project-costs")
def replace_project_costs():
    rows = _extract_rows(request.get_json(silent=True))
    if not isinstance(rows, list):
        return jsonify({"error": "Expected a list of cost records."}), 400
    records = parse_cost_records(rows)
    state.replace(records)
    logger.info("Replaced project cost batch with %d records", len(records))
    return jsonify({"message": "Project costs replaced.", "count": len(records), "projects": state.list_project_names()})


@app.delete("/api/statistics/project-costs")
def clear_project_costs():
    state.clear()
    return jsonify({"message": "Project costs cleared.", "count": 0})


@app.get("/api/statistics/project-costs/chart")
def get_project_costs_chart():
    try:
        granularity = Granularity.parse(request.args.get("groupBy", Granularity.MONTH.value))
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400
    return jsonify(_chart_payload(state.get(), granularity))


@app.post("/api/statistics/project-costs/chart")
def build_project_costs_chart():
    payload = request.get_json(silent=True) or {}
    if not isinstance(payload, dict):
        return jsonify({"error": "Expected a JSON object."}), 400
    group_by = _extract_payload_value(payload, "groupBy", "granularity", default=Granularity.MONTH.value)
    try:
        granularity = Granularity.parse(group_by)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400
    rows = _extract_rows(payload)
    if not isinstance(rows, list):
        return jsonify({"error": "Expected a list of cost records."}), 400
    return jsonify(_chart_payload(parse_cost_records(rows), granularity))


if __name__ == "__main__":
    configure_logging(settings.log_level)
    app.run(debug=settings.debug, port=settings.api_port)
