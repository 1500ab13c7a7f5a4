"""Raid-start hooks for both host variants.

The host calls exactly one of these per raid; each re-resolves the season so
a long-running server never serves yesterday's season.
"""

from flask import Blueprint, jsonify, request

from shseasons.api.helpers import get_controller
from shseasons.logging_config import get_logger

log = get_logger(__name__)

spt_bp = Blueprint("spt_hooks", __name__)
fika_bp = Blueprint("fika_hooks", __name__)


@spt_bp.route("/weather", methods=["GET", "POST"])
def api_client_weather():
    """Single-player raid start: set the season, then hand back the weather state."""
    controller = get_controller()
    season = controller.on_raid_start()
    current = controller.slot.read()
    return jsonify({
        "season": current,
        "season_name": None if season is None else season.display_name,
        "applied": season is not None,
    })


@fika_bp.route("/raid/create", methods=["POST"])
def api_fika_raid_create():
    """Multiplayer raid creation: set the season, return the request body unchanged."""
    body = request.get_json(silent=True)
    controller = get_controller()
    season = controller.on_raid_start()
    if season is not None:
        log.debug("FIKA raid create, weather set to %s", season.display_name)
    return jsonify(body if body is not None else {})
