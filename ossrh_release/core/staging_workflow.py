"""Staging repository lifecycle

A release run drives one staging repository through
create -> deploy -> close -> promote. Close and promote are asynchronous on
the Nexus side, so both are followed by bounded polling of the repository
status.
"""

import logging
import time
from pathlib import Path
from typing import Callable, Optional

from ..api.exceptions import (
    ConfigurationError,
    ProcessError,
    ParseError,
    CreationError,
    DeployError,
    CloseTimeoutError,
    PromoteError,
    PromoteTimeoutError,
)
from ..models.config import ReleaseConfiguration, PollingPolicy
from ..models.repository import StagingRepository, RepositoryStatus, WorkflowState
from ..utils.file_utils import list_files, write_repository_marker
from ..utils.xml_parser import (
    extract_status,
    extract_failure_messages,
    extract_staged_repository_id,
    extract_http_status,
)
from .nexus_client import NexusClient

logger = logging.getLogger(__name__)


class StagingWorkflow:
    """Drives one staging repository through its lifecycle"""

    def __init__(self,
                 config: ReleaseConfiguration,
                 client: Optional[NexusClient] = None,
                 sleep: Callable[[float], None] = time.sleep,
                 marker_dir: Optional[Path] = None):
        """
        Initialize workflow

        Args:
            config: Release configuration
            client: Nexus client (default: curl through a ProcessGateway)
            sleep: Function used to wait between polling attempts
            marker_dir: Where the staging repository marker is written
        """
        self.config = config
        self.client = client or NexusClient(config)
        self.sleep = sleep
        self.marker_dir = marker_dir
        self.state = WorkflowState.UNINITIALIZED

    def mark_signed(self) -> None:
        """Record that artifacts were signed in this run"""
        self.state = WorkflowState.SIGNED

    def create_repository(self) -> str:
        """
        Create a staging repository

        Returns:
            Id assigned by Nexus

        Raises:
            CreationError: If the request fails or no id is returned
        """
        args = self.client.start_args()
        response = None
        try:
            response = self.client.start()
            repository_id = extract_staged_repository_id(response)
        except ProcessError as e:
            raise CreationError(command=e.command, response=e.response) from e
        except ParseError as e:
            raise CreationError(command=self.client.display(args), response=response) from e

        self.state = WorkflowState.CREATED
        logger.info(f"Created staging repository {repository_id}")
        return repository_id

    def deploy_artifacts(self, repository_id: str, artifact_root: Path) -> int:
        """
        Upload every module file into the staging repository

        Args:
            repository_id: Target staging repository
            artifact_root: Directory holding one sub-directory per module

        Returns:
            Number of files uploaded

        Raises:
            DeployError: On the first failed upload
        """
        self._require_repository(repository_id)
        artifact_root = Path(artifact_root)
        uploaded = 0

        for module in self.config.module_names:
            module_path = artifact_root / module
            if not module_path.is_dir():
                raise DeployError(f"Module directory not found: {module_path}")

            for path in list_files(module_path):
                try:
                    self.client.upload(repository_id, module, path)
                except ProcessError as e:
                    raise DeployError(
                        f"Uploading {module}/{path.name} failed",
                        command=e.command,
                        response=e.response,
                    ) from e
                uploaded += 1

        self.state = WorkflowState.DEPLOYED
        logger.info(f"Deployed {uploaded} file(s) to {repository_id}")
        return uploaded

    def close_repository(self, repository_id: str) -> StagingRepository:
        """
        Close a staging repository and wait for Nexus to validate it

        On success the id is written to the marker file so that a later
        promote run can find the repository.

        Raises:
            CloseTimeoutError: If the repository is not closed within the
                polling bound; carries the failure messages from the
                repository activity feed
        """
        self._require_repository(repository_id)
        self.state = WorkflowState.CLOSING
        self.client.finish(repository_id)

        repository = self._poll(
            repository_id,
            self.config.close_polling,
            done=lambda repo: repo.is_closed,
        )

        if not repository.is_closed:
            self.state = WorkflowState.CLOSE_FAILED
            activity = self.client.repository_activity(repository_id)
            raise CloseTimeoutError(
                repository_id,
                self.config.close_polling.max_attempts,
                extract_failure_messages(activity),
                response=activity,
            )

        self.state = WorkflowState.CLOSED
        write_repository_marker(repository_id, self.marker_dir)
        return repository

    def promote_repository(self, repository_id: str) -> StagingRepository:
        """
        Promote a closed staging repository

        Polling ends at the first status other than ``closed``; an explicit
        ``released`` status is not required.

        Raises:
            PromoteError: If the promote request is rejected
            PromoteTimeoutError: If the repository is still closed after the
                polling bound
        """
        self._require_repository(repository_id)
        self.state = WorkflowState.PROMOTING
        args = self.client.promote_args(repository_id)

        try:
            response = self.client.promote(repository_id)
        except ProcessError as e:
            self.state = WorkflowState.PROMOTE_FAILED
            raise PromoteError(command=e.command, response=e.response) from e

        http_status = extract_http_status(response)
        if http_status is not None and not 200 <= http_status < 300:
            self.state = WorkflowState.PROMOTE_FAILED
            raise PromoteError(
                f"Promoting staging repository failed with HTTP {http_status}.",
                command=self.client.display(args),
                response=response,
            )

        repository = self._poll(
            repository_id,
            self.config.promote_polling,
            done=lambda repo: not repo.is_closed,
        )

        if repository.is_closed:
            self.state = WorkflowState.PROMOTE_FAILED
            raise PromoteTimeoutError(repository_id, self.config.promote_polling.max_attempts)

        self.state = WorkflowState.RELEASED
        return repository

    def fetch_repository(self, repository_id: str) -> StagingRepository:
        """Query the current status of a staging repository"""
        token = extract_status(self.client.repository_status(repository_id))
        return StagingRepository(
            repository_id=repository_id,
            status=RepositoryStatus.from_token(token),
            status_token=token,
        )

    def _poll(self, repository_id: str, policy: PollingPolicy,
              done: Callable[[StagingRepository], bool]) -> StagingRepository:
        repository = StagingRepository(repository_id)
        for attempt in range(1, policy.max_attempts + 1):
            repository = self.fetch_repository(repository_id)
            logger.info(
                f"Polling {repository_id} ({attempt}/{policy.max_attempts}): "
                f"{repository.status_token}"
            )
            if done(repository):
                break
            if attempt < policy.max_attempts:
                self.sleep(policy.delay)
        return repository

    @staticmethod
    def _require_repository(repository_id: Optional[str]) -> None:
        if not repository_id:
            raise ConfigurationError(
                "Staging repository id is not known", field="staging_repository_id"
            )
