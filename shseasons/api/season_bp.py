"""Season status and diagnostics blueprint."""

from flask import Blueprint, jsonify, request

from shseasons.api.helpers import get_controller, parse_date_arg, parse_year_arg
from shseasons.season.calendar import get_calendar
from shseasons.season.calendar_report import season_spans, year_calendar

season_bp = Blueprint("season", __name__)


@season_bp.route("/status")
def api_status():
    return jsonify(get_controller().status())


@season_bp.route("/resolve")
def api_resolve():
    """Resolve the season for ``?date=`` without touching the slot."""
    when, err = parse_date_arg(request.args.get("date"))
    if err:
        return jsonify(err[0]), err[1]

    controller = get_controller()
    season = controller.resolver.resolve(when, controller.config)
    return jsonify({
        "date": when.isoformat(),
        "season": int(season),
        "season_name": season.display_name,
        "forced": controller.config.force_season is not None,
    })


@season_bp.route("/check", methods=["POST"])
def api_check():
    controller = get_controller()
    report = controller.check_override()
    if report is None:
        return jsonify({"checked": False, "report": None})
    return jsonify({
        "checked": True,
        "report": report.model_dump(mode="json"),
        "message": report.describe(),
    })


@season_bp.route("/calendar")
def api_calendar():
    year, err = parse_year_arg(request.args.get("year"))
    if err:
        return jsonify(err[0]), err[1]

    controller = get_controller()
    name = request.args.get("variant") or controller.config.calendar
    try:
        table = get_calendar(name)
    except KeyError:
        return jsonify({"error": f"Unknown calendar '{name}'."}), 400

    spans = season_spans(year_calendar(year, table))
    rows = [
        {
            "season": int(row.season),
            "season_name": row.season_name,
            "start": row.start.isoformat(),
            "end": row.end.isoformat(),
            "days": int(row.days),
        }
        for row in spans.itertuples(index=False)
    ]
    return jsonify({"year": year, "calendar": table.name, "spans": rows})
