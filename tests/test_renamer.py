from __future__ import annotations

from pathlib import Path

import pytest

from file_renamer.model import RenameStatus
from file_renamer.renamer import rename_all, rename_file


def test_rename_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "report.v1.cpp"
    source.write_text("x", encoding="utf-8")

    outcome = rename_file(source, "txt")

    assert outcome.status is RenameStatus.RENAMED
    assert outcome.target == tmp_path / "report.v1.txt"
    assert outcome.target.read_text(encoding="utf-8") == "x"
    assert not source.exists()
    assert capsys.readouterr().out == f"Renaming: {source} -> {outcome.target}\n"


def test_rename_all_continues_after_failure(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    missing = tmp_path / "vanished.cpp"
    present = tmp_path / "kept.cpp"
    present.write_text("x", encoding="utf-8")

    report = rename_all([missing, present], "txt")

    assert [o.status for o in report.outcomes] == [RenameStatus.FAILED, RenameStatus.RENAMED]
    assert report.renamed_count == 1
    assert report.failed_count == 1
    assert report.outcomes[0].error
    assert (tmp_path / "kept.txt").exists()

    captured = capsys.readouterr()
    assert f"  -> Failed to rename file '{missing}'" in captured.err
    assert captured.out.splitlines() == [
        f"Renaming: {missing} -> {tmp_path / 'vanished.txt'}",
        f"Renaming: {present} -> {tmp_path / 'kept.txt'}",
    ]


def test_rename_all_same_extension_is_noop(tmp_path: Path) -> None:
    source = tmp_path / "x.txt"
    source.write_text("x", encoding="utf-8")

    report = rename_all([source], "txt")

    assert report.renamed_count == 1
    assert source.read_text(encoding="utf-8") == "x"


def test_rename_all_keeps_order(tmp_path: Path) -> None:
    paths = []
    for name in ("c.cpp", "a.cpp", "b.cpp"):
        p = tmp_path / name
        p.write_text(name, encoding="utf-8")
        paths.append(p)

    report = rename_all(paths, "hpp")

    assert [o.source.name for o in report.outcomes] == ["c.cpp", "a.cpp", "b.cpp"]
    assert sorted(p.name for p in tmp_path.iterdir()) == ["a.hpp", "b.hpp", "c.hpp"]


def test_rename_all_with_progress_bar(tmp_path: Path) -> None:
    source = tmp_path / "a.cpp"
    source.write_text("x", encoding="utf-8")

    report = rename_all([source], "txt", progress=True)

    assert report.renamed_count == 1
