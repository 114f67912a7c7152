"""Configuration data models"""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Dict, List, Optional, Any, Tuple

from ..constants import (
    DEFAULT_NEXUS_URL,
    DEFAULT_GROUP_ID,
    DEFAULT_PROJECT_NAME,
    DEFAULT_MODULE_NAMES,
    DEFAULT_CLOSE_MAX_ATTEMPTS,
    DEFAULT_CLOSE_DELAY,
    DEFAULT_PROMOTE_MAX_ATTEMPTS,
    DEFAULT_PROMOTE_DELAY,
    FIELD_SOURCES,
    SERVICE_PATH,
)


@dataclass(frozen=True)
class PollingPolicy:
    """Bounded fixed-delay polling"""

    max_attempts: int
    delay: float = 0

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.delay < 0:
            raise ValueError("delay must not be negative")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {"max_attempts": self.max_attempts, "delay": self.delay}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]],
                  default: 'PollingPolicy') -> 'PollingPolicy':
        """Create from dictionary, falling back to default values"""
        if not data:
            return default
        return cls(
            max_attempts=int(data.get("max_attempts", default.max_attempts)),
            delay=float(data.get("delay", default.delay)),
        )


DEFAULT_CLOSE_POLLING = PollingPolicy(DEFAULT_CLOSE_MAX_ATTEMPTS, DEFAULT_CLOSE_DELAY)
DEFAULT_PROMOTE_POLLING = PollingPolicy(DEFAULT_PROMOTE_MAX_ATTEMPTS, DEFAULT_PROMOTE_DELAY)


@dataclass(frozen=True)
class ReleaseConfiguration:
    """Values gathered at startup for one release run

    The configuration is immutable. The staging repository id created by an
    upload is threaded through the workflow explicitly; ``with_repository_id``
    gives a copy for callers that need one carrying it.
    """

    username: Optional[str] = None
    password: Optional[str] = None
    staging_profile_id: Optional[str] = None
    staging_repository_id: Optional[str] = None
    gpg_passphrase: Optional[str] = None
    artifact_folder: Optional[Path] = None
    release_version: Optional[str] = None

    group_id: str = DEFAULT_GROUP_ID
    project_name: str = DEFAULT_PROJECT_NAME
    module_names: Tuple[str, ...] = DEFAULT_MODULE_NAMES

    nexus_url: str = DEFAULT_NEXUS_URL
    insecure: bool = True
    close_polling: PollingPolicy = DEFAULT_CLOSE_POLLING
    promote_polling: PollingPolicy = DEFAULT_PROMOTE_POLLING

    @property
    def group_path(self) -> str:
        """Group id as a repository path (com.example -> com/example)"""
        return self.group_id.replace(".", "/")

    @property
    def service_url(self) -> str:
        """Base URL of the Nexus REST service"""
        return f"{self.nexus_url.rstrip('/')}/{SERVICE_PATH}"

    @property
    def description(self) -> str:
        """Staging repository description"""
        return f"{self.project_name}-{self.release_version}"

    @property
    def secrets(self) -> List[str]:
        """Values that must never appear in printed commands"""
        return [s for s in (self.username, self.password, self.gpg_passphrase) if s]

    def missing(self, fields) -> List[str]:
        """Return the names of fields that are unset or empty"""
        return [name for name in fields if not getattr(self, name)]

    def with_repository_id(self, repository_id: str) -> 'ReleaseConfiguration':
        """Return a copy carrying the given staging repository id"""
        return replace(self, staging_repository_id=repository_id)

    @staticmethod
    def source_of(field_name: str) -> str:
        """Name of the environment variable that supplies a field"""
        return FIELD_SOURCES.get(field_name, field_name)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary with credentials masked"""
        return {
            "username": "**" if self.username else None,
            "password": "**" if self.password else None,
            "staging_profile_id": self.staging_profile_id,
            "staging_repository_id": self.staging_repository_id,
            "gpg_passphrase": "**" if self.gpg_passphrase else None,
            "artifact_folder": str(self.artifact_folder) if self.artifact_folder else None,
            "release_version": self.release_version,
            "group_id": self.group_id,
            "project_name": self.project_name,
            "modules": list(self.module_names),
            "nexus_url": self.nexus_url,
            "insecure": self.insecure,
            "polling": {
                "close": self.close_polling.to_dict(),
                "promote": self.promote_polling.to_dict(),
            },
        }
