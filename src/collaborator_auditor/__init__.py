"""collaborator_auditor package."""

from .classifier import classify, is_admin, is_reader, is_writer
from .config import AuditConfig, ConfigError, Settings, load_settings
from .github_api import CollaboratorsClient, FetchResult
from .models import ClassificationResult, CollaboratorRecord, Permissions, parse_collaborators
from .reporter import Reporter
from .validator import UsageError, validate_inputs

__all__ = [
    "AuditConfig",
    "ClassificationResult",
    "CollaboratorRecord",
    "CollaboratorsClient",
    "ConfigError",
    "FetchResult",
    "Permissions",
    "Reporter",
    "Settings",
    "UsageError",
    "classify",
    "is_admin",
    "is_reader",
    "is_writer",
    "load_settings",
    "parse_collaborators",
    "validate_inputs",
]
