"""
Startup checks: positional arguments, credentials and JSON support.
"""

from __future__ import annotations

import importlib.util
from datetime import datetime
from typing import Mapping, Sequence

from .config import AuditConfig, Settings, report_path_for
from .constants import RULE, TOKEN_ENV, USAGE_EXAMPLES, USERNAME_ENV


class UsageError(Exception):
    """Raised when the run cannot start; the message is shown to the user."""

    def __init__(self, message: str, guidance: str = "") -> None:
        super().__init__(message)
        self.guidance = guidance


def usage_text(prog: str) -> str:
    """Return the usage block, with example invocations and required variables."""
    lines = [
        RULE,
        "GitHub Collaborators Audit",
        RULE,
        "",
        f"Usage: {prog} <repository-owner> <repository-name>",
        "",
        "Example:",
    ]
    lines += [f"  {prog} {owner} {name}" for owner, name in USAGE_EXAMPLES]
    lines += [
        "",
        "Prerequisites:",
        "  Set environment variables:",
        f"     export {USERNAME_ENV}='your_username'",
        f"     export {TOKEN_ENV}='your_personal_access_token'",
        "",
    ]
    return "\n".join(lines)


def credentials_text() -> str:
    return "\n".join([
        "Please set your credentials as environment variables:",
        f"  export {USERNAME_ENV}='your_username'",
        f"  export {TOKEN_ENV}='your_token'",
    ])


def json_support_available() -> bool:
    """True when the JSON decoder can be imported."""
    return importlib.util.find_spec("json") is not None


def validate_inputs(
    argv: Sequence[str],
    environ: Mapping[str, str],
    settings: Settings,
    *,
    prog: str = "collaborator-audit",
    now: datetime | None = None,
) -> AuditConfig:
    """
    Check the command line and environment and build the run configuration.

    Args:
        argv: Positional arguments, without the program name.
        environ: Environment to read credentials from.
        settings: Loaded settings (API base, report directory, colour).
        prog: Program name shown in the usage text.
        now: Run start time, used to name the report file.

    Returns:
        The configuration every later stage receives.

    Raises:
        UsageError: If arguments or credentials are missing, or JSON
            support is unavailable.
    """
    args = list(argv)
    if len(args) != 2 or not all(arg.strip() for arg in args):
        raise UsageError("Missing repository information!", usage_text(prog))

    principal = environ.get(USERNAME_ENV, "")
    token = environ.get(TOKEN_ENV, "")
    if not principal or not token:
        raise UsageError(
            "GitHub credentials not found!",
            credentials_text() + "\n\n" + usage_text(prog),
        )

    if not json_support_available():
        raise UsageError(
            "JSON support is not available in this Python environment!",
            "Reinstall Python with the standard library json module.\n\n" + usage_text(prog),
        )

    owner, repo = args
    return AuditConfig(
        owner=owner,
        repo=repo,
        principal=principal,
        token=token,
        output_path=report_path_for(now or datetime.now(), settings.report_dir),
        api_base=settings.api_base,
        color=settings.color,
    )
