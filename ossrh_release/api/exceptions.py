"""Exception definitions for ossrh-release"""

from typing import List, Optional

from ..constants import ErrorCode


class ReleaseError(Exception):
    """Base exception for ossrh-release"""

    def __init__(self, message: str, error_code: str = None,
                 command: Optional[str] = None, response: Optional[str] = None):
        super().__init__(message)
        self.error_code = error_code
        self.command = command
        self.response = response


class ConfigurationError(ReleaseError):
    """Required configuration value is missing or malformed"""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, ErrorCode.CONFIGURATION_MISSING)
        self.field = field


class ProcessError(ReleaseError):
    """External tool could not be started or exited non-zero"""

    def __init__(self, message: str, command: Optional[str] = None,
                 output: Optional[str] = None, returncode: Optional[int] = None):
        super().__init__(message, ErrorCode.PROCESS_FAILED, command, output)
        self.returncode = returncode


class ParseError(ReleaseError):
    """Expected token is absent from a response body"""

    def __init__(self, message: str, response: Optional[str] = None):
        super().__init__(message, ErrorCode.PARSE_FAILED, response=response)


class SigningError(ReleaseError):
    """Checksum or signature generation failed"""

    def __init__(self, message: str, command: Optional[str] = None,
                 response: Optional[str] = None):
        super().__init__(message, ErrorCode.SIGNING_FAILED, command, response)


class CreationError(ReleaseError):
    """Staging repository could not be created"""

    def __init__(self, message: str = "Creating staging repository failed.",
                 command: Optional[str] = None, response: Optional[str] = None):
        super().__init__(message, ErrorCode.CREATION_FAILED, command, response)


class DeployError(ReleaseError):
    """Uploading an artifact to the staging repository failed"""

    def __init__(self, message: str, command: Optional[str] = None,
                 response: Optional[str] = None):
        super().__init__(message, ErrorCode.DEPLOY_FAILED, command, response)


class CloseTimeoutError(ReleaseError):
    """Staging repository did not reach the closed state in time"""

    def __init__(self, repository_id: str, attempts: int,
                 failure_messages: Optional[List[str]] = None,
                 response: Optional[str] = None):
        message = (
            f"Closing staging repository {repository_id} failed: "
            f"not closed after {attempts} polling attempt(s)."
        )
        super().__init__(message, ErrorCode.CLOSE_TIMEOUT, response=response)
        self.repository_id = repository_id
        self.attempts = attempts
        self.failure_messages = failure_messages or []


class PromoteError(ReleaseError):
    """Promote request was rejected"""

    def __init__(self, message: str = "Promoting staging repository failed.",
                 command: Optional[str] = None, response: Optional[str] = None):
        super().__init__(message, ErrorCode.PROMOTE_FAILED, command, response)


class PromoteTimeoutError(ReleaseError):
    """Staging repository was still closed after the promote polling bound"""

    def __init__(self, repository_id: str, attempts: int):
        message = (
            f"Promoting staging repository {repository_id} failed: "
            f"still closed after {attempts} polling attempt(s)."
        )
        super().__init__(message, ErrorCode.PROMOTE_TIMEOUT)
        self.repository_id = repository_id
        self.attempts = attempts
