# ossrh_release/models/__init__.py
"""Data models for ossrh-release"""

from .artifact import ArtifactFile, is_companion
from .config import ReleaseConfiguration, PollingPolicy
from .repository import StagingRepository, RepositoryStatus, WorkflowState
from .result import OperationResult, OperationStatus

__all__ = [
    # Artifact models
    "ArtifactFile",
    "is_companion",

    # Config models
    "ReleaseConfiguration",
    "PollingPolicy",

    # Repository models
    "StagingRepository",
    "RepositoryStatus",
    "WorkflowState",

    # Result models
    "OperationResult",
    "OperationStatus",
]
