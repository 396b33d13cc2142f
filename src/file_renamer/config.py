from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

DEFAULT_MAX_FILES = 10000
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class RenameOptions:
    directory: Path
    from_extension: str  # without the leading dot
    to_extension: str
    skip_confirmation: bool = False
    recursive: bool = False


@dataclass(frozen=True, slots=True)
class ScanConfig:
    max_files: int = DEFAULT_MAX_FILES  # 0 disables the limit


@dataclass(frozen=True, slots=True)
class OutputConfig:
    progress: bool = False


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    level: str = "WARNING"


@dataclass(frozen=True, slots=True)
class AppSettings:
    scan: ScanConfig = field(default_factory=ScanConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _as_dict_table(value: Any, name: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise TypeError(f"config: [{name}] must be a TOML table")
    return value


def _get_bool(table: dict[str, Any], key: str, default: bool) -> bool:
    value = table.get(key, default)
    if not isinstance(value, bool):
        raise TypeError(f"config: {key} must be a bool")
    return value


def _get_int(table: dict[str, Any], key: str, default: int) -> int:
    value = table.get(key, default)
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"config: {key} must be an int")
    return value


def _get_str(table: dict[str, Any], key: str, default: str) -> str:
    value = table.get(key, default)
    if not isinstance(value, str):
        raise TypeError(f"config: {key} must be a string")
    return value


def _validate(settings: AppSettings) -> None:
    if settings.scan.max_files < 0:
        raise ValueError("config: scan.max_files must be >= 0")
    if settings.logging.level not in LOG_LEVELS:
        raise ValueError(f"config: logging.level must be one of {', '.join(LOG_LEVELS)}")


def load_settings(path: Path | None) -> AppSettings:
    """
    Load optional tool settings from a TOML file.

    Without a path every table falls back to its defaults.
    """
    if path is None:
        return AppSettings()
    if not path.exists():
        raise FileNotFoundError(f"config not found: {path}")

    import tomllib

    data = tomllib.loads(path.read_text(encoding="utf-8"))

    scan_table = _as_dict_table(data.get("scan"), "scan")
    output_table = _as_dict_table(data.get("output"), "output")
    logging_table = _as_dict_table(data.get("logging"), "logging")

    settings = AppSettings(
        scan=ScanConfig(
            max_files=_get_int(scan_table, "max_files", DEFAULT_MAX_FILES),
        ),
        output=OutputConfig(
            progress=_get_bool(output_table, "progress", False),
        ),
        logging=LoggingConfig(
            level=_get_str(logging_table, "level", "WARNING").upper(),
        ),
    )

    _validate(settings)
    return settings
