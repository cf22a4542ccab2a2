"""Command-line front door for tfselect.

Handles the help/version surface, scans the working directory for targets,
runs the interactive wizard, and hands the chosen command to terraform.
"""

from __future__ import annotations

import argparse
import logging
import sys
import termios
from pathlib import Path

from .config import Settings, load_settings
from .errors import ExecutionFailure, ScanFailure
from .logger import setup_logging
from .loop import run_wizard_loop
from .picker.geometry import terminal_geometry
from .runner import build_terraform_args, run_terraform
from .scanner import find_targets
from .terminal import TerminalController
from .ui_theme import UITheme, available_theme_names, resolve_theme
from .version import __version__
from .wizard import Wizard, WizardResult

logger = logging.getLogger(__name__)

HELP_ARGS = frozenset({"-h", "--help", "help"})
VERSION_ARGS = frozenset({"-v", "--version", "version"})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tfselect",
        allow_abbrev=False,
        add_help=False,
        description=(
            "Pick Terraform modules/resources from the *.tf files in the current "
            "directory, choose plan or apply, and run terraform with -target flags."
        ),
        epilog=(
            "Keys: type to filter, Up/Down move, Space toggle, Enter confirm, Esc quit. "
            f"Themes: {', '.join(available_theme_names())} (config key 'theme'). "
            "Set NO_COLOR to disable colors."
        ),
    )
    parser.add_argument("-h", "--help", action="store_true", help="Show this help and exit.")
    parser.add_argument("-v", "--version", action="store_true", help="Show the version and exit.")
    parser.add_argument(
        "command",
        nargs="?",
        help="'help' or 'version'; anything else is ignored and the selector starts.",
    )
    return parser


def run_interactive(targets: list[str], settings: Settings, theme: UITheme) -> WizardResult:
    """Run the wizard on the controlling terminal."""
    try:
        stdin_fd = sys.stdin.fileno()
        stdout_fd = sys.stdout.fileno()
        terminal = TerminalController(stdin_fd, stdout_fd)
    except (OSError, ValueError, termios.error) as exc:
        raise SystemExit(f"error: cannot start interactive session: {exc}") from exc

    wizard = Wizard(targets, terminal_geometry, auto_select_all=settings.auto_select_all)
    return run_wizard_loop(wizard, terminal, stdin_fd, theme)


def main(argv: list[str] | None = None, directory: Path | None = None) -> None:
    """Parse CLI arguments and launch the target selector.

    Only the first argument is inspected. ``directory`` is primarily for
    tests; when omitted the current working directory is scanned.
    """
    args_in = sys.argv[1:] if argv is None else list(argv)
    parser = build_parser()
    first = args_in[0] if args_in else None

    if first in HELP_ARGS:
        sys.stdout.write(parser.format_help())
        return
    if first in VERSION_ARGS:
        sys.stdout.write(f"tfselect {__version__}\n")
        return

    settings = load_settings()
    setup_logging(settings.log_level)
    if args_in:
        logger.debug("ignoring arguments %s", args_in)

    scan_root = Path.cwd() if directory is None else directory
    try:
        targets = find_targets(scan_root)
    except ScanFailure as exc:
        raise SystemExit(f"error: {exc}") from exc

    theme = resolve_theme(settings.theme, no_color=settings.no_color)
    result = run_interactive(targets, settings, theme)
    if result.cancelled:
        return

    args = build_terraform_args(result.action, result.targets)
    try:
        run_terraform(args, settings.terraform_binary)
    except ExecutionFailure as exc:
        raise SystemExit(f"error: {exc}") from exc


if __name__ == "__main__":
    main()
