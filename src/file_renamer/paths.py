from __future__ import annotations

import logging
import stat
from collections.abc import Iterator
from pathlib import Path

from file_renamer.extensions import extension_matches

LOGGER = logging.getLogger(__name__)


def _list_dir(directory: Path) -> list[Path]:
    try:
        return list(directory.iterdir())
    except OSError as e:
        LOGGER.debug("Skipping unreadable directory %s: %s", directory, e)
        return []


def _stat_mode(path: Path) -> int | None:
    try:
        return path.stat().st_mode
    except OSError as e:
        LOGGER.debug("Skipping %s: %s", path, e)
        return None


def is_directory(path: Path) -> bool:
    """Like Path.is_dir, but any stat failure (EACCES included) means "no"."""
    mode = _stat_mode(path)
    return mode is not None and stat.S_ISDIR(mode)


def scan_directory(*, root: Path, extension: str, recursive: bool, max_files: int = 0) -> list[Path]:
    """
    Collects regular files under `root` whose extension matches `extension`.

    Entries are visited in directory-listing order. In recursive mode the walk is
    depth-first pre-order: a subdirectory is fully scanned before the siblings
    that follow it. Entries that cannot be stat'ed are skipped. `max_files` caps
    the result (0 means no cap); once reached, a warning is logged and the scan
    stops.
    """
    matches: list[Path] = []
    stack: list[Iterator[Path]] = [iter(_list_dir(root))]

    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue

        mode = _stat_mode(entry)
        if mode is None:
            continue

        if stat.S_ISREG(mode):
            if not extension_matches(entry.name, extension):
                continue
            if max_files and len(matches) >= max_files:
                LOGGER.warning("Maximum file limit (%d) reached; remaining matches are skipped.", max_files)
                break
            matches.append(entry)
        elif recursive and stat.S_ISDIR(mode):
            stack.append(iter(_list_dir(entry)))

    LOGGER.info("Found %d matching files under %s", len(matches), root)
    return matches
