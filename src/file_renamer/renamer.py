from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from tqdm import tqdm

from file_renamer.extensions import replace_extension
from file_renamer.model import RenameOutcome, RenameReport, RenameStatus
from file_renamer.report import announce_outcome, announce_rename

LOGGER = logging.getLogger(__name__)


def rename_file(source: Path, to_extension: str) -> RenameOutcome:
    target = replace_extension(source, to_extension)
    announce_rename(source, target)
    try:
        source.rename(target)
    except OSError as e:
        LOGGER.debug("rename %s -> %s failed", source, target, exc_info=True)
        return RenameOutcome(source=source, target=target, status=RenameStatus.FAILED, error=str(e))
    return RenameOutcome(source=source, target=target, status=RenameStatus.RENAMED)


def rename_all(paths: Iterable[Path], to_extension: str, *, progress: bool = False) -> RenameReport:
    """
    Renames every path in order. A failure is recorded and reported, then the
    next path is attempted.
    """
    report = RenameReport()
    for source in tqdm(paths, desc="rename", unit="file", disable=not progress):
        outcome = rename_file(source, to_extension)
        announce_outcome(outcome)
        report.outcomes.append(outcome)

    LOGGER.info("Renamed %d files, %d failed", report.renamed_count, report.failed_count)
    return report
