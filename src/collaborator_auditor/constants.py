"""
Application-wide constants: API location, environment names, report naming
and the fixed text of each report section.
"""

from pathlib import Path

API_BASE = "https://api.github.com"
USER_AGENT = "collaborator-auditor/0.1"

USERNAME_ENV = "GITHUB_USERNAME"
TOKEN_ENV    = "GITHUB_TOKEN"

SETTINGS_FILE = Path("collaborator_audit.toml")

REPORT_PREFIX      = "collaborators_report_"
REPORT_SUFFIX      = ".txt"
REPORT_TIME_FORMAT = "%Y%m%d_%H%M%S"

REPORT_TITLE = "GitHub Repository Collaborators Audit Report"
RULE = "=" * 42

# (console header, report label, "none found" sentence)
ADMIN_SECTION = ("ADMIN USERS (Full Control)", "ADMIN USERS:", "No admin users found.")
WRITE_SECTION = ("WRITE ACCESS (Can Push Code)", "WRITE ACCESS:", "No users with write access found.")
READ_SECTION  = ("READ-ONLY ACCESS (Can View/Clone)", "READ-ONLY ACCESS:", "No users with read-only access found.")

USAGE_EXAMPLES = (("microsoft", "vscode"), ("facebook", "react"))
