"""Staging repository models"""

from dataclasses import dataclass
from enum import Enum

from ..constants import STAGING_CONTENT_PATH


class RepositoryStatus(Enum):
    """Lifecycle status reported by Nexus"""
    OPEN = "open"
    CLOSED = "closed"
    RELEASED = "released"
    UNKNOWN = "unknown"

    @classmethod
    def from_token(cls, token: str) -> 'RepositoryStatus':
        """Map a <type> token to a status, UNKNOWN for anything unrecognised"""
        try:
            return cls(token.strip().lower())
        except ValueError:
            return cls.UNKNOWN


class WorkflowState(Enum):
    """Local view of where a release run is"""
    UNINITIALIZED = "uninitialized"
    CREATED = "created"
    SIGNED = "signed"
    DEPLOYED = "deployed"
    CLOSING = "closing"
    CLOSED = "closed"
    CLOSE_FAILED = "close_failed"
    PROMOTING = "promoting"
    RELEASED = "released"
    PROMOTE_FAILED = "promote_failed"


@dataclass
class StagingRepository:
    """One remote staging repository

    Nexus is authoritative for ``status``; the value here is the last one
    observed while polling.
    """

    repository_id: str
    status: RepositoryStatus = RepositoryStatus.UNKNOWN
    status_token: str = ""

    @property
    def is_closed(self) -> bool:
        return self.status == RepositoryStatus.CLOSED

    def content_url(self, nexus_url: str) -> str:
        """URL where the staged artifacts can be browsed"""
        return f"{nexus_url.rstrip('/')}/{STAGING_CONTENT_PATH}/{self.repository_id}"
