"""Release task implementation"""

import logging
import time
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from ..api.exceptions import ReleaseError
from ..constants import TASK_GPG, TASK_UPLOAD, TASK_PROMOTE, PUBLIC_GROUP_PATH
from ..core import ArtifactSigner, NexusClient, StagingWorkflow
from ..models import ReleaseConfiguration, OperationResult
from ..utils.output import print_stage, print_success
from ..utils.process import ProcessGateway
from .config_service import validate

logger = logging.getLogger(__name__)


class ReleaseService:
    """Runs the gpg, upload and promote tasks

    Every task validates its configuration before touching any external
    tool and reports its outcome as an OperationResult instead of raising.
    """

    def __init__(self,
                 config: ReleaseConfiguration,
                 gateway: Optional[ProcessGateway] = None,
                 sleep: Optional[Callable[[float], None]] = None,
                 project_root: Optional[Path] = None):
        """
        Initialize release service

        Args:
            config: Release configuration
            gateway: Process gateway shared by signer and Nexus client
            sleep: Wait function used between polling attempts
            project_root: Directory for the staging repository marker
        """
        self.config = config
        self.gateway = gateway or ProcessGateway()
        self.sleep = sleep or time.sleep
        self.project_root = project_root

    def run(self, task: str) -> OperationResult:
        """Dispatch a task by name"""
        handlers = {
            TASK_GPG: self.sign,
            TASK_UPLOAD: self.upload,
            TASK_PROMOTE: self.promote,
        }
        if task not in handlers:
            raise ValueError(f"Unknown task: {task}")
        return handlers[task]()

    def _workflow(self) -> StagingWorkflow:
        return StagingWorkflow(
            self.config,
            client=NexusClient(self.config, self.gateway),
            sleep=self.sleep,
            marker_dir=self.project_root,
        )

    def sign(self) -> OperationResult:
        """Task gpg: checksum and sign the artifacts"""
        started = datetime.utcnow()
        try:
            validate(self.config, TASK_GPG)
            artifacts = self._sign()
        except ReleaseError as e:
            return OperationResult.failed(TASK_GPG, e, start_time=started)

        return OperationResult.ok(
            TASK_GPG,
            "Checksum and gpg sign finished.",
            start_time=started,
            metadata={"artifacts": len(artifacts)},
        )

    def upload(self) -> OperationResult:
        """Task upload: create a staging repository, sign, deploy and close it"""
        started = datetime.utcnow()
        repository_id = None
        try:
            validate(self.config, TASK_UPLOAD)
            workflow = self._workflow()

            print_stage("Nexus: Create staging repo")
            repository_id = workflow.create_repository()
            print_success(f"Staging repository id: {repository_id}")

            artifacts = self._sign()
            workflow.mark_signed()

            print_stage("Nexus: Deploy artifacts to staging repo")
            uploaded = workflow.deploy_artifacts(repository_id, self.config.artifact_folder)
            print_success(f"Deployed {uploaded} file(s)")

            print_stage("Nexus: Verify and Close staging repo")
            repository = workflow.close_repository(repository_id)
        except ReleaseError as e:
            return OperationResult.failed(TASK_UPLOAD, e, repository_id=repository_id,
                                          start_time=started)

        return OperationResult.ok(
            TASK_UPLOAD,
            "Nexus: Staging completion.",
            start_time=started,
            repository_id=repository_id,
            links=[repository.content_url(self.config.nexus_url)],
            metadata={"artifacts": len(artifacts), "uploaded": uploaded},
        )

    def promote(self) -> OperationResult:
        """Task promote: release a closed staging repository"""
        started = datetime.utcnow()
        repository_id = self.config.staging_repository_id
        try:
            validate(self.config, TASK_PROMOTE)
            print_stage("Nexus: Promote")
            repository = self._workflow().promote_repository(repository_id)
        except ReleaseError as e:
            return OperationResult.failed(TASK_PROMOTE, e, repository_id=repository_id,
                                          start_time=started)

        return OperationResult.ok(
            TASK_PROMOTE,
            "Nexus: Promote succeeded.",
            start_time=started,
            repository_id=repository_id,
            links=[self.public_url()],
            metadata={"status": repository.status_token},
        )

    def public_url(self) -> str:
        """Public group URL where promoted artifacts show up"""
        return (f"{self.config.nexus_url.rstrip('/')}/{PUBLIC_GROUP_PATH}/"
                f"{self.config.group_path}")

    def _sign(self):
        print_stage("Checksum and gpg sign")
        signer = ArtifactSigner(self.config, self.gateway)
        artifacts = signer.sign(self.config.artifact_folder)
        print_success(f"Signed {len(artifacts)} artifact(s)")
        return artifacts
