"""Entry point: python -m shseasons [resolve|calendar|serve]"""

from __future__ import annotations

import argparse
import sys
from datetime import date

from shseasons.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shseasons",
        description="Southern Hemisphere season selection for the host weather system.",
    )
    sub = parser.add_subparsers(dest="command")

    p_resolve = sub.add_parser("resolve", help="Print the season for a date")
    p_resolve.add_argument("--date", type=date.fromisoformat, default=None,
                           help="YYYY-MM-DD (default: today)")
    p_resolve.add_argument("--config", default=None, help="Path to config.jsonc")

    p_cal = sub.add_parser("calendar", help="Print season spans for a year")
    p_cal.add_argument("--year", type=int, default=date.today().year)
    p_cal.add_argument("--variant", default=None, help="Calendar variant name")
    p_cal.add_argument("--config", default=None, help="Path to config.jsonc")

    p_serve = sub.add_parser("serve", help="Run the dev host on localhost")
    p_serve.add_argument("--host", default=None)
    p_serve.add_argument("--port", type=int, default=None)
    return parser


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)
    command = args.command or "serve"

    if command == "serve":
        from shseasons.api import create_app
        from shseasons.config import server_cfg

        app = create_app()
        app.run(
            host=getattr(args, "host", None) or server_cfg.host,
            port=getattr(args, "port", None) or server_cfg.port,
            debug=False,
        )
        return 0

    from shseasons.data.config_loader import load_mod_config

    config = load_mod_config(args.config)

    if command == "resolve":
        from shseasons.season.resolver import SeasonResolver

        when = args.date or date.today()
        if not config.enabled:
            print("Mod is disabled; host season left unchanged.")
            return 0
        season = SeasonResolver().resolve(when, config)
        print(f"{when.isoformat()}: {season.display_name} ({int(season)})")
        return 0

    from shseasons.season.calendar import CALENDARS
    from shseasons.season.calendar_report import season_spans, year_calendar

    name = args.variant or config.calendar
    if name not in CALENDARS:
        print(f"Unknown calendar '{name}'. Choose from: {', '.join(CALENDARS)}", file=sys.stderr)
        return 2
    spans = season_spans(year_calendar(args.year, CALENDARS[name]))
    print(spans.to_string(index=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
