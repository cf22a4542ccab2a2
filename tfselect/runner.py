"""Build and run the terraform command chosen in the wizard."""

from __future__ import annotations

import logging
import shlex
import subprocess
import sys
from collections.abc import Sequence

from .errors import ExecutionFailure

logger = logging.getLogger(__name__)

DEFAULT_TERRAFORM_BINARY = "terraform"


def build_terraform_args(action: str, targets: Sequence[str]) -> list[str]:
    """Return ``[action, -target=...]``; no targets means the whole config."""
    return [action, *(f"-target={target}" for target in targets)]


def format_command_line(binary: str, args: Sequence[str]) -> str:
    """Return the shell-quoted command line echoed before terraform runs."""
    return " ".join(shlex.quote(part) for part in [binary, *args])


def run_terraform(args: Sequence[str], binary: str = DEFAULT_TERRAFORM_BINARY) -> None:
    """Echo and run terraform with inherited stdio, waiting for it to exit.

    Raises :class:`ExecutionFailure` when the binary cannot be started or
    exits with a non-zero status.
    """
    command = [binary, *args]
    sys.stdout.write(format_command_line(binary, args) + "\n")
    sys.stdout.flush()
    logger.info("running %s", command)
    try:
        completed = subprocess.run(command, check=False)
    except OSError as exc:
        raise ExecutionFailure(f"cannot run {binary}: {exc.strerror or exc}") from exc
    logger.info("%s exited with status %d", binary, completed.returncode)
    if completed.returncode != 0:
        raise ExecutionFailure(
            f"{binary} exited with status {completed.returncode}",
            returncode=completed.returncode,
        )
