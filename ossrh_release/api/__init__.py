# ossrh_release/api/__init__.py
"""API layer for ossrh-release"""

from .exceptions import (
    ReleaseError,
    ConfigurationError,
    ProcessError,
    ParseError,
    SigningError,
    CreationError,
    DeployError,
    CloseTimeoutError,
    PromoteError,
    PromoteTimeoutError,
)

__all__ = [
    "ReleaseError",
    "ConfigurationError",
    "ProcessError",
    "ParseError",
    "SigningError",
    "CreationError",
    "DeployError",
    "CloseTimeoutError",
    "PromoteError",
    "PromoteTimeoutError",
]
