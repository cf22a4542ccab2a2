"""Discover module and resource addresses from ``.tf`` files.

Only line-level ``module "x"`` and ``resource "t" "n"`` headers are
recognised; this is not an HCL parser.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from .errors import ScanFailure

logger = logging.getLogger(__name__)

TF_EXTENSION = ".tf"
MODULE_RE = re.compile(r'^\s*module\s+"([^"]+)"')
RESOURCE_RE = re.compile(r'^\s*resource\s+"([^"]+)"\s+"([^"]+)"')
COMMENT_PREFIXES = ("#", "//", "/*")


def targets_in_line(line: str) -> str | None:
    """Return the target address declared on ``line``, if any."""
    stripped = line.strip()
    if not stripped or stripped.startswith(COMMENT_PREFIXES):
        return None
    match = MODULE_RE.match(stripped)
    if match:
        return f"module.{match.group(1)}"
    match = RESOURCE_RE.match(stripped)
    if match:
        return f"resource.{match.group(1)}.{match.group(2)}"
    return None


def collect_targets(path: Path) -> set[str]:
    """Return target addresses declared in one file."""
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise ScanFailure(f"cannot read {path}: {exc.strerror or exc}") from exc
    found: set[str] = set()
    for line in text.splitlines():
        target = targets_in_line(line)
        if target is not None:
            found.add(target)
    return found


def find_targets(directory: Path) -> list[str]:
    """Return sorted, de-duplicated targets from ``*.tf`` in ``directory``."""
    try:
        paths = sorted(path for path in directory.glob(f"*{TF_EXTENSION}") if path.is_file())
    except OSError as exc:
        raise ScanFailure(f"cannot list {directory}: {exc.strerror or exc}") from exc

    seen: set[str] = set()
    for path in paths:
        seen |= collect_targets(path)
    targets = sorted(seen)
    logger.debug("scanned %d file(s) in %s, found %d target(s)", len(paths), directory, len(targets))
    return targets
