import logging
import os
from http import HTTPStatus
from typing import Any, Dict, List, Mapping, Optional, Tuple

from flask import Flask, jsonify, render_template, request

from interest_calc import config
from interest_calc.data_models import ScheduleRow, Selection, ValidationResult
from interest_calc.engine import display_horizon, schedule_for
from interest_calc.exceptions import InvalidRateError, PreferenceStoreError
from interest_calc.formatter import currency_format, rate_format, row_to_dict, schedule_to_dicts
from interest_calc.preferences import PreferenceStore, load_interest_rate, save_interest_rate
from interest_calc.selection import (
    select_row,
    selected_month,
    selected_month_label,
    summary_row,
    track_term,
)
from interest_calc.utils import format_plain_number, parse_int
from interest_calc.validation import (
    FIELDS,
    INTEREST_RATE,
    LOAN_AMOUNT,
    MONTHS,
    snap_months_on_blur,
    step_months,
    validate_loan_form,
)
from interest_calc_web.preference_store import create_store_from_env

app = Flask(__name__)
app.config["ASSET_VERSION"] = os.environ.get("ASSET_VERSION", "1")
app.config["PREFERENCE_DATABASE_URL"] = os.environ.get("PREFERENCE_DATABASE_URL")
app.secret_key = os.environ.get("FLASK_SECRET_KEY", "dev-secret-key")

app.add_template_filter(currency_format, "currency")
app.add_template_filter(rate_format, "rate")
app.add_template_filter(format_plain_number, "plain")
app.add_template_filter(selected_month_label, "month_label")


def get_preference_store() -> PreferenceStore:
    """Return the app's preference store, opening it on first use."""
    store = app.extensions.get("preference_store")
    if store is None:
        store = create_store_from_env(app.config["PREFERENCE_DATABASE_URL"])
        app.extensions["preference_store"] = store
    return store


def _load_rate(notices: List[str]) -> float:
    try:
        return load_interest_rate(get_preference_store())
    except PreferenceStoreError:
        notices.append("Could not load saved interest rate.")
        return config.DEFAULT_MONTHLY_RATE


def _json_object() -> Optional[Dict[str, Any]]:
    """Return the posted JSON body, or ``None`` when it is not an object."""
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    return payload if isinstance(payload, dict) else None


def _not_an_object():
    return jsonify({"detail": "Expected a JSON object"}), HTTPStatus.BAD_REQUEST


def _form_fields(form: Mapping[str, Any]) -> Dict[str, Any]:
    return {name: form.get(name, "") for name in FIELDS}


def _apply_action(
    action: str,
    argument: str,
    fields: Dict[str, Any],
    form: Mapping[str, Any],
    notices: List[str],
) -> Optional[Selection]:
    """Apply one form event to ``fields`` in place.

    Returns the selection when the event picked a row, otherwise ``None`` and
    the selection follows the months field.
    """
    if action == "increment":
        fields[MONTHS] = step_months(fields[MONTHS], 1)
    elif action == "decrement":
        fields[MONTHS] = step_months(fields[MONTHS], -1)
    elif action == "blur_months":
        fields[MONTHS] = snap_months_on_blur(fields[MONTHS])
    elif action == "select_row":
        month = parse_int(argument or form.get("month"))
        if month is not None:
            selection, fields[MONTHS] = select_row(month)
            return selection
    elif action == "save_rate":
        try:
            fields[INTEREST_RATE] = save_interest_rate(get_preference_store(), form.get("custom_rate", ""))
        except InvalidRateError as exc:
            notices.append(f"Invalid Input: {exc.message}")
        except PreferenceStoreError:
            notices.append("Could not save interest rate.")
    return None


def _analyse(
    fields: Mapping[str, Any], selection: Optional[Selection] = None
) -> Tuple[ValidationResult, Selection, List[ScheduleRow], Optional[ScheduleRow]]:
    result = validate_loan_form(fields)
    if selection is None:
        selection = track_term(result.values[MONTHS])
    schedule = schedule_for(result.loan)
    return result, selection, schedule, summary_row(selection, schedule)


@app.route("/", methods=["GET", "POST"])
def index():
    notices: List[str] = []
    selection = None

    if request.method == "POST":
        fields = _form_fields(request.form)
        action, _, argument = request.form.get("action", "calculate").partition(":")
        selection = _apply_action(action, argument, fields, request.form, notices)
    else:
        fields = {
            LOAN_AMOUNT: "",
            MONTHS: config.DEFAULT_TERM_MONTHS,
            INTEREST_RATE: _load_rate(notices),
        }

    result, selection, schedule, summary = _analyse(fields, selection)
    horizon = schedule[-1].month if schedule else (result.values[MONTHS] or 0)

    return render_template(
        "index.html",
        values=result.values,
        errors=result.errors_by_field(),
        loan=result.loan,
        schedule=schedule,
        summary=summary,
        selected_month=selected_month(selection),
        horizon=horizon,
        notices=notices,
        asset_version=app.config["ASSET_VERSION"],
    )


@app.post("/api/schedule")
def api_schedule():
    """Validate the posted fields and return the breakdown as JSON."""
    payload = _json_object()
    if payload is None:
        return _not_an_object()
    selection = None
    month = parse_int(payload.get("selectedMonth"))
    fields = _form_fields(payload)
    if month is not None:
        selection, fields[MONTHS] = select_row(month)
    result, selection, schedule, summary = _analyse(fields, selection)
    return jsonify(
        {
            "values": result.values,
            "errors": result.errors_by_field(),
            "horizon": display_horizon(result.loan.term_months) if result.loan else 0,
            "schedule": schedule_to_dicts(schedule),
            "selectedMonth": selected_month(selection),
            "summary": row_to_dict(summary) if summary else None,
        }
    )


@app.post("/api/months/blur")
def api_months_blur():
    payload = _json_object()
    if payload is None:
        return _not_an_object()
    return jsonify({MONTHS: snap_months_on_blur(payload.get(MONTHS))})


@app.route("/api/rate", methods=["GET", "PUT"])
def api_rate():
    """Read or replace the remembered interest rate."""
    try:
        if request.method == "GET":
            return jsonify({INTEREST_RATE: load_interest_rate(get_preference_store())})
        payload = _json_object()
        if payload is None:
            return _not_an_object()
        saved = save_interest_rate(get_preference_store(), payload.get(INTEREST_RATE))
        return jsonify({INTEREST_RATE: saved})
    except InvalidRateError as exc:
        return jsonify({"detail": exc.message}), HTTPStatus.BAD_REQUEST
    except PreferenceStoreError as exc:
        return (
            jsonify({"detail": exc.message, INTEREST_RATE: config.DEFAULT_MONTHLY_RATE}),
            HTTPStatus.SERVICE_UNAVAILABLE,
        )


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    print("Starting Interest Calculator web app...")
    app.run(host="0.0.0.0", port=8710, debug=True)
