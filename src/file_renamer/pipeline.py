from __future__ import annotations

import logging
from typing import TextIO

from file_renamer.config import AppSettings, RenameOptions
from file_renamer.confirm import ask_confirmation
from file_renamer.model import RenameReport
from file_renamer.paths import is_directory, scan_directory
from file_renamer.renamer import rename_all
from file_renamer.report import (
    print_cancelled,
    print_match_list,
    print_no_matches,
    print_scan_start,
    print_separator,
    print_summary,
)

LOGGER = logging.getLogger(__name__)


def run_pipeline(
    *, options: RenameOptions, settings: AppSettings, stdin: TextIO | None = None
) -> RenameReport | None:
    """
    Scan, confirm and rename.

    Returns the rename report, or None when nothing was renamed because there
    were no matches or the user declined. Raises NotADirectoryError before any
    scanning when `options.directory` is not a directory.
    """
    directory = options.directory
    if not is_directory(directory):
        raise NotADirectoryError(f"The provided path is not a valid directory: {directory}")

    print_scan_start(directory)
    matches = scan_directory(
        root=directory,
        extension=options.from_extension,
        recursive=options.recursive,
        max_files=settings.scan.max_files,
    )

    if not matches:
        print_no_matches(options.from_extension)
        return None

    print_match_list(
        matches,
        from_extension=options.from_extension,
        to_extension=options.to_extension,
    )

    if not options.skip_confirmation and not ask_confirmation(stdin):
        print_cancelled()
        return None

    print_separator()
    report = rename_all(matches, options.to_extension, progress=settings.output.progress)
    print_summary(report.renamed_count)
    return report
