# ossrh_release/services/__init__.py
"""Business logic services for ossrh-release"""

from .config_service import ConfigService, validate
from .release_service import ReleaseService

__all__ = [
    "ConfigService",
    "validate",
    "ReleaseService",
]
