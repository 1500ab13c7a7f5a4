"""Flask application factory."""

from flask import Flask

from shseasons.season.controller import SeasonController


def create_app(controller: SeasonController | None = None) -> Flask:
    """Create and configure the Flask application.

    Without a *controller* one is built from ``config/config.jsonc`` with an
    in-memory slot, and the load hooks run immediately.
    """
    app = Flask(__name__)

    if controller is None:
        controller = _default_controller()
    app.extensions["season_controller"] = controller

    from shseasons.api.middleware import register_middleware
    register_middleware(app)

    from shseasons.api.hooks_bp import fika_bp, spt_bp
    from shseasons.api.season_bp import season_bp
    from shseasons.season.controller import HostVariant

    # Only the raid-start hook of the running host variant is registered.
    if controller.host_variant is HostVariant.FIKA:
        app.register_blueprint(fika_bp, url_prefix="/fika")
    else:
        app.register_blueprint(spt_bp, url_prefix="/client")
    app.register_blueprint(season_bp, url_prefix="/api/season")

    return app


def _default_controller() -> SeasonController:
    from shseasons.data.config_loader import load_mod_config
    from shseasons.season.controller import detect_host_variant
    from shseasons.season.slot import InMemorySlot

    controller = SeasonController(
        load_mod_config(),
        InMemorySlot(),
        host_variant=detect_host_variant(),
    )
    controller.on_load()
    controller.on_post_load()
    return controller
