"""Core functionality for ossrh-release"""

from .nexus_client import NexusClient
from .signer import ArtifactSigner
from .staging_workflow import StagingWorkflow

__all__ = [
    "NexusClient",
    "ArtifactSigner",
    "StagingWorkflow",
]
