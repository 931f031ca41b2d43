"""Command-line entry point: ``lazylogger`` / ``python -m lazylogger``."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from lazylogger import __version__
from lazylogger.constants.enums import EventSource
from lazylogger.constants.limits import TICK_INTERVAL_MS_MAX, TICK_INTERVAL_MS_MIN
from lazylogger.models.state.config_manager import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigManager,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _tick_ms(value: str) -> int:
    try:
        tick = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from exc
    if not TICK_INTERVAL_MS_MIN <= tick <= TICK_INTERVAL_MS_MAX:
        raise argparse.ArgumentTypeError(
            f"must be between {TICK_INTERVAL_MS_MIN} and {TICK_INTERVAL_MS_MAX}"
        )
    return tick


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazylogger",
        description="Browse ECS clusters and tail a service's events in the terminal.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        metavar="PATH",
        help="Settings file (default: $LAZYLOGGER_CONFIG or ~/.config/lazylogger/settings.yaml)",
    )
    parser.add_argument("--region", help="AWS region for ECS and CloudWatch Logs calls")
    parser.add_argument(
        "--event-source",
        choices=[source.value for source in EventSource],
        help="Show ECS service events or the service's CloudWatch log group",
    )
    parser.add_argument(
        "--tick-ms",
        type=_tick_ms,
        dest="tick_interval_ms",
        metavar="MS",
        help="Scheduler tick interval in milliseconds",
    )
    parser.add_argument("--log-file", metavar="PATH", help="Write diagnostics to this file")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=_LOG_LEVELS,
        help="Diagnostics level (default: WARNING)",
    )
    parser.add_argument(
        "--inline-fetch",
        action="store_true",
        help="Await AWS calls inside the tick instead of in the background",
    )
    parser.add_argument(
        "--init-config",
        action="store_true",
        help="Write a settings file with the effective values and exit",
    )
    return parser


def overrides_from_args(args: argparse.Namespace) -> dict[str, Any]:
    """Collect the settings fields given on the command line."""
    overrides: dict[str, Any] = {}
    for field in ("region", "event_source", "tick_interval_ms", "log_file", "log_level"):
        value = getattr(args, field, None)
        if value is not None:
            overrides[field] = value
    if getattr(args, "inline_fetch", False):
        overrides["background_fetch"] = False
    return overrides


def configure_logging(settings: AppSettings) -> logging.Handler:
    """Route package logs to ``log_file``, or discard them.

    The TUI owns the terminal, so nothing may be written to stdout or stderr
    while it runs.
    """
    package_logger = logging.getLogger("lazylogger")
    package_logger.setLevel(settings.log_level)

    handler: logging.Handler
    if settings.log_file:
        path = Path(settings.log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.NullHandler()
    package_logger.addHandler(handler)
    return handler


def resolve_settings(config_path: Path | None, overrides: dict[str, Any]) -> AppSettings:
    """Settings the app will run with, for configuring logging before it starts."""
    try:
        settings = ConfigManager.load(config_path)
    except ConfigLoadError:
        # LazyLoggerApp reports the failure once logging is configured.
        settings = AppSettings()
    return AppSettings.model_validate({**settings.model_dump(), **overrides})


def init_config(config_path: Path | None, overrides: dict[str, Any]) -> int:
    settings = AppSettings.model_validate(overrides)
    try:
        written = ConfigManager.save(settings, config_path)
    except ConfigError as exc:
        print(f"lazylogger: {exc}", file=sys.stderr)
        return 1
    print(f"Wrote {written}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    overrides = overrides_from_args(args)

    if args.init_config:
        return init_config(args.config, overrides)

    # Imported here so --help and --init-config do not pay for Textual and boto3.
    from lazylogger.app import LazyLoggerApp

    configure_logging(resolve_settings(args.config, overrides))
    app = LazyLoggerApp(config_path=args.config, overrides=overrides)
    logger.info("Starting LazyLogger %s in %s", __version__, app.settings.region)
    app.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
