"""Configuration helpers for collaborator-auditor."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

try:
    import tomllib
except ImportError:  # pragma: no cover - Python 3.11+ includes tomllib; fallback to tomli on older versions
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None

from .constants import API_BASE, REPORT_PREFIX, REPORT_SUFFIX, REPORT_TIME_FORMAT, SETTINGS_FILE


class ConfigError(Exception):
    """Raised when the settings file cannot be loaded."""


@dataclass(frozen=True)
class Settings:
    """Optional tuning read from collaborator_audit.toml."""

    api_base: str = API_BASE
    report_dir: Path = Path(".")
    color: bool = True


@dataclass(frozen=True)
class AuditConfig:
    """Everything one audit run needs, built once at startup."""

    owner: str
    repo: str
    principal: str
    token: str = field(repr=False)
    output_path: Path
    api_base: str = API_BASE
    color: bool = True

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


def report_path_for(now: datetime, report_dir: str | Path = ".") -> Path:
    """Return the report file path for a run started at ``now``."""
    return Path(report_dir) / f"{REPORT_PREFIX}{now.strftime(REPORT_TIME_FORMAT)}{REPORT_SUFFIX}"


def _settings_from_dict(data: Dict[str, Any], path: Path) -> Settings:
    api_base = data.get("api_base", API_BASE)
    report_dir = data.get("report_dir", ".")
    color = data.get("color", True)

    if not isinstance(api_base, str) or not api_base.strip():
        raise ConfigError(f"api_base in {path} must be a non-empty string")
    if not isinstance(report_dir, str):
        raise ConfigError(f"report_dir in {path} must be a string")
    if not isinstance(color, bool):
        raise ConfigError(f"color in {path} must be true or false")

    return Settings(api_base=api_base.rstrip("/"), report_dir=Path(report_dir), color=color)


def load_settings(settings_path: str | Path = SETTINGS_FILE) -> Settings:
    """
    Load optional settings from a TOML file.

    Args:
        settings_path: Path to the TOML settings file.

    Returns:
        Parsed settings, or the defaults when the file does not exist.

    Raises:
        ConfigError: If the file exists but TOML support is unavailable,
            the file cannot be parsed, or a value has the wrong type.
    """
    path = Path(settings_path)
    if not path.exists():
        return Settings()

    if tomllib is None:
        raise ConfigError("TOML support is required to load settings.")

    try:
        with path.open("rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError) as exc:  # type: ignore[attr-defined]
        raise ConfigError(f"Failed to load settings from {path}") from exc

    return _settings_from_dict(data, path)
