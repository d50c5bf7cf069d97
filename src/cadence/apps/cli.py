"""CLI entry point for cadence.

Parses arguments, configures logging, loads configuration and launches the
Textual journal. Command-line flags override values from config.json.
"""

import argparse
import dataclasses
import logging
import os

from cadence.apps.config import JournalConfig, load_config
from cadence.core.constants import DEFAULT_MODE
from cadence.core.modes import PresentationMode


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Append-only journal whose letters follow your typing cadence"
    )
    parser.add_argument(
        "--mode",
        default=None,
        choices=[m.value for m in PresentationMode],
        help=f"Visual parameter driven by typing cadence (default: from config or {DEFAULT_MODE})",
    )
    parser.add_argument(
        "--min-interval-ms",
        type=float,
        default=None,
        help="Keystroke interval treated as fastest (default: from config or 75)",
    )
    parser.add_argument(
        "--max-interval-ms",
        type=float,
        default=None,
        help="Keystroke interval treated as slowest (default: from config or 200)",
    )
    parser.add_argument(
        "--config-file",
        default=None,
        help="JSON config file (default: ~/.config/cadence/config.json)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write logs to this file (the terminal belongs to the UI)",
    )
    parser.add_argument(
        "--list-modes", action="store_true", help="List presentation modes"
    )
    return parser


def setup_logging(log_file: str | None = None) -> None:
    """Configure root logging from ``LOG_LEVEL`` (default INFO)."""
    from rich.console import Console
    from rich.logging import RichHandler

    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    handler: logging.Handler
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    else:
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            rich_tracebacks=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    logging.basicConfig(level=log_level, handlers=[handler], force=True)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def list_modes() -> None:
    """Display presentation modes with their fast/slow/default values."""
    from rich.console import Console
    from rich.table import Table

    from cadence.core.modes import IntervalWindow

    window = IntervalWindow()
    console = Console()
    table = Table(title="Presentation Modes")
    table.add_column("Mode", style="cyan")
    table.add_column(f"Fast (≤{window.min_ms:.0f} ms)", justify="right")
    table.add_column(f"Slow (≥{window.max_ms:.0f} ms)", justify="right")
    table.add_column("Default", justify="right", style="green")
    for mode in PresentationMode:
        fast = mode.mapping.value_for(window.min_ms, window)
        slow = mode.mapping.value_for(window.max_ms, window)
        table.add_row(mode.value, f"{fast:g}", f"{slow:g}", f"{mode.default:g}")
    console.print(table)


def _apply_overrides(config: JournalConfig, args: argparse.Namespace) -> JournalConfig:
    """Fold CLI flags into the loaded config."""
    changes: dict[str, object] = {}
    if args.mode:
        changes["mode"] = PresentationMode.parse(args.mode)
    if args.min_interval_ms is not None:
        changes["min_interval_ms"] = args.min_interval_ms
    if args.max_interval_ms is not None:
        changes["max_interval_ms"] = args.max_interval_ms
    if not changes:
        return config
    cadence = dataclasses.replace(config.cadence, **changes)
    return dataclasses.replace(config, cadence=cadence)


def main() -> int:
    """CLI entry point. Returns exit code."""
    parser = build_arg_parser()
    args = parser.parse_args()

    setup_logging(args.log_file)

    if args.list_modes:
        list_modes()
        return 0

    from cadence.apps.journal_app import CadenceJournalApp

    try:
        config = _apply_overrides(load_config(args.config_file), args)
    except ValueError as exc:
        parser.error(str(exc))

    logging.getLogger("cadence").info(
        "Starting journal (mode=%s, window=%.0f-%.0f ms)",
        config.cadence.mode,
        config.cadence.min_interval_ms,
        config.cadence.max_interval_ms,
    )
    CadenceJournalApp(config).run()
    return 0
