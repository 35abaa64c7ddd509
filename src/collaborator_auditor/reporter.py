"""
Console and report-file rendering of a classification result.

Every section goes to the console stream; the same content, without colour,
is appended to a single report file opened once per run.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import IO, Sequence, Tuple

from .colors import head, ok
from .constants import ADMIN_SECTION, READ_SECTION, REPORT_TITLE, RULE, WRITE_SECTION
from .models import ClassificationResult

Section = Tuple[str, str, str]


class Reporter:
    """Writes audit sections to ``stream`` and appends them to ``report_path``."""

    def __init__(self, stream: IO[str], report_path: str | Path, *, color: bool = True) -> None:
        self.stream = stream
        self.report_path = Path(report_path)
        self.color = color
        self._file: IO[str] | None = None

    def __enter__(self) -> "Reporter":
        self.report_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.report_path.open("a", encoding="utf-8")
        return self

    def __exit__(self, *exc_info) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def _print(self, text: str = "") -> None:
        self.stream.write(f"{text}\n")

    def _save(self, text: str = "") -> None:
        if self._file is None:
            raise RuntimeError("Reporter must be used as a context manager")
        self._file.write(f"{text}\n")

    def _print_header(self, title: str) -> None:
        self._print()
        self._print(RULE)
        self._print(head(title, self.color))
        self._print(RULE)

    def write_header(self, full_name: str, generated: datetime) -> None:
        """Persist the report title block."""
        self._save(REPORT_TITLE)
        self._save(f"Repository: {full_name}")
        self._save(f"Generated: {generated.strftime('%c')}")
        self._save(RULE)

    def write_bucket(self, section: Section, logins: Sequence[str]) -> None:
        """Print and persist one permission bucket."""
        title, label, none_found = section
        self._print_header(title)

        if not logins:
            self._print(none_found)
            self._save(none_found)
            return

        self._save(label)
        for login in logins:
            self._print(login)
            self._save(login)

    def write_statistics(self, result: ClassificationResult) -> None:
        self._print_header("STATISTICS SUMMARY")
        self._print(f"Total Collaborators: {result.total}")
        self._print(f"  - Admin: {result.admin_count}")
        self._print(f"  - Write: {result.write_count}")
        self._print(f"  - Read:  {result.read_count}")

        self._save()
        self._save("STATISTICS:")
        self._save(
            f"Total: {result.total} (Admin: {result.admin_count}, "
            f"Write: {result.write_count}, Read: {result.read_count})"
        )

    def write_completion(self) -> None:
        self._print()
        self._print(RULE)
        self._print(ok("Audit completed successfully!", self.color))
        self._print(f"Report saved to: {self.report_path}")
        self._print(RULE)

    def write_report(self, full_name: str, generated: datetime, result: ClassificationResult) -> None:
        """Render the whole report: header, three buckets, statistics, banner."""
        self.write_header(full_name, generated)
        self.write_bucket(ADMIN_SECTION, result.admins)
        self.write_bucket(WRITE_SECTION, result.writers)
        self.write_bucket(READ_SECTION, result.readers)
        self.write_statistics(result)
        self.write_completion()
