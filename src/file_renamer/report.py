from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

from tqdm import tqdm

from file_renamer.model import RenameOutcome, RenameStatus

SEPARATOR = "---"


def print_scan_start(directory: Path) -> None:
    print(f"Scanning directory: {directory}")


def print_no_matches(extension: str) -> None:
    print(f"No files with extension '.{extension}' found to rename.")


def print_match_list(matches: Sequence[Path], *, from_extension: str, to_extension: str) -> None:
    print("file found:")
    for path in matches:
        print(f"  {path}")
    print(f"Will change extensions from '.{from_extension}' to '.{to_extension}'")


def print_cancelled() -> None:
    print("Operation cancelled.")


def print_separator() -> None:
    print(SEPARATOR)


# Per-file lines go through tqdm.write so they do not tear an active progress bar.
def announce_rename(source: Path, target: Path) -> None:
    tqdm.write(f"Renaming: {source} -> {target}", file=sys.stdout)


def announce_outcome(outcome: RenameOutcome) -> None:
    if outcome.status is RenameStatus.FAILED:
        tqdm.write(f"  -> Failed to rename file '{outcome.source}': {outcome.error}", file=sys.stderr)


def summary_message(renamed_count: int) -> str:
    if renamed_count == 0:
        return "No files were renamed."
    if renamed_count == 1:
        return "Done. Successfully renamed 1 file."
    return f"Done. Successfully renamed {renamed_count} files."


def print_summary(renamed_count: int) -> None:
    print_separator()
    print(summary_message(renamed_count))
