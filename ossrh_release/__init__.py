"""ossrh-release - Publish Maven artifacts to Maven Central through Nexus OSSRH.

This tool signs build artifacts, uploads them to a Nexus staging repository,
closes the repository and promotes it to the public release channel.
"""

from .__version__ import __version__, __version_info__, __author__, __email__, __license__

# Core API
from .core import ArtifactSigner, NexusClient, StagingWorkflow
from .services import ConfigService, ReleaseService

# Data models
from .models import (
    ArtifactFile,
    ReleaseConfiguration,
    PollingPolicy,
    StagingRepository,
    RepositoryStatus,
    WorkflowState,
    OperationResult,
    OperationStatus,
)

# Exceptions
from .api.exceptions import (
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

# Utility functions
from .utils import (
    ProcessGateway,
    extract_status,
    extract_failure_messages,
)

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__email__",
    "__license__",

    # Main classes
    "ArtifactSigner",
    "NexusClient",
    "StagingWorkflow",
    "ConfigService",
    "ReleaseService",

    # Data models
    "ArtifactFile",
    "ReleaseConfiguration",
    "PollingPolicy",
    "StagingRepository",
    "RepositoryStatus",
    "WorkflowState",
    "OperationResult",
    "OperationStatus",

    # Exceptions
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

    # Utility functions
    "ProcessGateway",
    "extract_status",
    "extract_failure_messages",
]
