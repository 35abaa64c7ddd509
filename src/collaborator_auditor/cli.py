"""Command-line entry point for collaborator-auditor."""

from __future__ import annotations

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Mapping, Sequence

from .classifier import classify
from .colors import dim, ng, repo, step
from .config import ConfigError, load_settings
from .constants import SETTINGS_FILE
from .github_api import CollaboratorsClient
from .models import parse_collaborators
from .reporter import Reporter
from .validator import UsageError, validate_inputs


def _write(stream, text: str = "") -> None:
    stream.write(f"{text}\n")


def _write_fetch_failure(stream, full_name: str, reason: str, color: bool) -> None:
    _write(stream, f"{ng('Error', color)}: Unable to fetch collaborators. Please check:")
    _write(stream, f"  1. Repository exists: {full_name}")
    _write(stream, "  2. Your token has correct permissions")
    _write(stream, "  3. Your internet connection")
    _write(stream, dim(f"  ({reason})", color))


def main(
    argv: Sequence[str] | None = None,
    client: CollaboratorsClient | None = None,
    stream=None,
    *,
    environ: Mapping[str, str] | None = None,
    now: datetime | None = None,
    settings_path: str | Path = SETTINGS_FILE,
    prog: str = "collaborator-audit",
) -> int:
    """
    Run one collaborators audit.

    Args:
        argv: Positional arguments (owner, repository name). Defaults to sys.argv[1:].
        client: Optional CollaboratorsClient override for testing.
        stream: Optional stream to write output to. Defaults to stdout.
        environ: Environment holding the credentials. Defaults to os.environ.
        now: Run start time. Defaults to the current time.
        settings_path: Optional TOML settings file.
        prog: Program name shown in the usage text.

    Returns:
        Exit code.
    """
    stream = stream or sys.stdout
    argv = sys.argv[1:] if argv is None else argv
    environ = os.environ if environ is None else environ
    now = now or datetime.now()

    try:
        settings = load_settings(settings_path)
    except ConfigError as exc:
        _write(stream, f"{ng('Error')}: {exc}")
        return 1

    try:
        config = validate_inputs(argv, environ, settings, prog=prog, now=now)
    except UsageError as exc:
        _write(stream, f"{ng('Error', settings.color)}: {exc}")
        if exc.guidance:
            _write(stream)
            _write(stream, exc.guidance)
        return 1

    _write(stream)
    _write(stream, f"Starting audit for repository: {repo(config.full_name, config.color)}")
    _write(stream, f"Timestamp: {dim(now.strftime('%c'), config.color)}")
    _write(stream)
    _write(stream, step("Fetching collaborators from GitHub API...", config.color))

    client = client or CollaboratorsClient(config.principal, config.token, api_base=config.api_base)
    fetched = client.fetch_collaborators(config.owner, config.repo)
    if not fetched.ok:
        _write_fetch_failure(stream, config.full_name, fetched.reason, config.color)
        return 1

    try:
        records = parse_collaborators(fetched.payload)
    except ValueError as exc:
        _write_fetch_failure(stream, config.full_name, str(exc), config.color)
        return 1

    if not records:
        _write(stream, f"No collaborators found for {config.full_name}")
        return 0

    result = classify(records)
    try:
        with Reporter(stream, config.output_path, color=config.color) as reporter:
            reporter.write_report(config.full_name, now, result)
    except OSError as exc:
        reason = exc.strerror or exc
        _write(stream, f"{ng('Error', config.color)}: Unable to write report {config.output_path}: {reason}")
        return 1
    return 0


def run() -> None:
    """Console-script entry point."""
    sys.exit(main(prog=Path(sys.argv[0]).name))
