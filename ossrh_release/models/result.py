"""Operation result models"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Any
from enum import Enum

from ..api.exceptions import ReleaseError


class OperationStatus(Enum):
    """Operation status"""
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class OperationResult:
    """Outcome of one task

    Failures keep the exception so the CLI can print its command and
    response; nothing below the CLI terminates the process.
    """

    task: str
    status: OperationStatus
    message: str = ""
    output: Optional[str] = None
    error: Optional[Exception] = None
    repository_id: Optional[str] = None
    links: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)
    start_time: datetime = field(default_factory=datetime.utcnow)
    end_time: Optional[datetime] = None

    @classmethod
    def ok(cls, task: str, message: str = "", **kwargs) -> 'OperationResult':
        result = cls(task=task, status=OperationStatus.SUCCESS, message=message, **kwargs)
        result.complete()
        return result

    @classmethod
    def failed(cls, task: str, error: Exception, **kwargs) -> 'OperationResult':
        result = cls(task=task, status=OperationStatus.FAILED, message=str(error),
                     error=error, **kwargs)
        result.complete()
        return result

    @property
    def is_success(self) -> bool:
        """Check if operation was successful"""
        return self.status == OperationStatus.SUCCESS

    @property
    def exit_code(self) -> int:
        return 0 if self.is_success else 1

    @property
    def error_code(self) -> Optional[str]:
        if isinstance(self.error, ReleaseError):
            return self.error.error_code
        return None

    @property
    def duration(self) -> Optional[float]:
        """Get operation duration in seconds"""
        if self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return None

    def complete(self) -> None:
        """Mark operation as complete"""
        self.end_time = datetime.utcnow()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "task": self.task,
            "status": self.status.value,
            "message": self.message,
            "duration": self.duration,
        }
        if self.repository_id:
            data["repository_id"] = self.repository_id
        if self.error_code:
            data["error_code"] = self.error_code
        if self.links:
            data["links"] = self.links
        if self.metadata:
            data["metadata"] = self.metadata
        return data
