"""Command-line interface for TunePicker."""

from __future__ import annotations

import argparse
import logging
import sys
import threading
from types import TracebackType
from typing import Iterable, Optional, Tuple

from tune_picker.catalog import Catalog, CatalogError, load_catalog
from tune_picker.config import Theme, load_config, theme_from_config
from tune_picker.logging_setup import init_logging
from tune_picker.player_vlc import VlcPlayer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser; the picker takes no options."""
    return argparse.ArgumentParser(
        prog="tune-picker",
        description="Pick an audio file below the current directory and play it.",
    )


def _install_exception_hooks() -> None:
    def excepthook(exc_type, exc, tb) -> None:
        logger.exception("Uncaught exception", exc_info=(exc_type, exc, tb))

    sys.excepthook = excepthook

    def thread_hook(args: threading.ExceptHookArgs) -> None:
        exc_value = args.exc_value or RuntimeError("unknown")
        exc_info: Tuple[type[BaseException], BaseException, Optional[TracebackType]] = (
            args.exc_type,
            exc_value,
            args.exc_traceback,
        )
        thread_name = args.thread.name if args.thread else "thread"
        logger.exception("Thread exception in %s", thread_name, exc_info=exc_info)

    threading.excepthook = thread_hook


def _run_tui(catalog: Catalog, player: VlcPlayer, theme: Theme) -> int:
    try:
        from tune_picker.tui import run_tui
    except RuntimeError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    return run_tui(catalog, player, theme=theme)


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Entry point for the CLI."""
    init_logging()
    logger.info("App start")
    _install_exception_hooks()

    build_parser().parse_args(list(argv) if argv is not None else None)
    config = load_config()

    try:
        catalog = load_catalog(config.root, config.extensions)
    except CatalogError as exc:
        logger.error("Startup failed: %s", exc)
        print(str(exc), file=sys.stderr)
        return 1

    try:
        player = VlcPlayer()
    except RuntimeError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    exit_code = _run_tui(catalog, player, theme_from_config(config))
    logger.info("App exit code=%s", exit_code)
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
