from __future__ import annotations

import string
from pathlib import Path

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def normalize_extension(raw: str) -> str:
    """Strip a single optional leading dot. Case is kept as given."""
    return raw[1:] if raw.startswith(".") else raw


def file_extension(name: str) -> str | None:
    """
    Returns the part of `name` after its last dot.

    A dot in first position (`.gitignore`) or last position (`notes.`) does not
    start an extension, so those names have none.
    """
    dot = name.rfind(".")
    if dot <= 0 or dot == len(name) - 1:
        return None
    return name[dot + 1 :]


def _ascii_casefold(value: str) -> str:
    return value.translate(_ASCII_LOWER)


def extension_matches(name: str, extension: str) -> bool:
    ext = file_extension(name)
    if ext is None:
        return False
    return _ascii_casefold(ext) == _ascii_casefold(extension)


def replace_extension(path: Path, extension: str) -> Path:
    """
    Returns `path` with the last dot-segment of its name replaced by `extension`.

    Names without a dot get `.<extension>` appended.
    """
    name = path.name
    dot = name.rfind(".")
    stem = name[:dot] if dot >= 0 else name
    return path.with_name(f"{stem}.{extension}")
