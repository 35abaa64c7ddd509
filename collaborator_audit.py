#!/usr/bin/env python3
"""Run collaborator-auditor from a source checkout without installing it.

    python collaborator_audit.py <repository-owner> <repository-name>
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from collaborator_auditor.cli import run  # noqa: E402

if __name__ == "__main__":
    run()
