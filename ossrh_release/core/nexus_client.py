"""Nexus staging REST requests issued through curl"""

from pathlib import Path
from typing import List, Optional

from ..constants import CURL_BINARY
from ..models.config import ReleaseConfiguration
from ..utils.process import ProcessGateway, mask

XML_CONTENT_TYPE = "Content-Type: application/xml"


def _promote_request(data: str) -> str:
    return f"<promoteRequest><data>{data}</data></promoteRequest>"


class NexusClient:
    """Builds and runs curl command lines against the staging API

    Credentials are passed to curl as given and masked in everything that
    is logged or reported.
    """

    def __init__(self, config: ReleaseConfiguration,
                 gateway: Optional[ProcessGateway] = None):
        self.config = config
        self.gateway = gateway or ProcessGateway()

    # URLs

    def profile_url(self, action: str) -> str:
        return (f"{self.config.service_url}/staging/profiles/"
                f"{self.config.staging_profile_id}/{action}")

    def repository_url(self, repository_id: str) -> str:
        return f"{self.config.service_url}/staging/repository/{repository_id}"

    def deploy_url(self, repository_id: str, module: str, file_name: str) -> str:
        return "/".join([
            f"{self.config.service_url}/staging/deployByRepositoryId",
            repository_id,
            self.config.group_path,
            module,
            self.config.release_version,
            file_name,
        ])

    # Command lines

    def _base_args(self) -> List[str]:
        # -sS drops the progress meter but keeps error messages
        args = [CURL_BINARY, "-u", f"{self.config.username}:{self.config.password}", "-sS"]
        if self.config.insecure:
            args.append("-k")
        return args

    def start_args(self) -> List[str]:
        body = _promote_request(f"<description>{self.config.description}</description>")
        return self._base_args() + [
            "-X", "POST", "-d", body, "-H", XML_CONTENT_TYPE, self.profile_url("start"),
        ]

    def finish_args(self, repository_id: str) -> List[str]:
        body = _promote_request(f"<stagedRepositoryId>{repository_id}</stagedRepositoryId>")
        return self._base_args() + [
            "-X", "POST", "-d", body, "-H", XML_CONTENT_TYPE, self.profile_url("finish"),
        ]

    def promote_args(self, repository_id: str) -> List[str]:
        body = _promote_request(f"<stagedRepositoryId>{repository_id}</stagedRepositoryId>")
        return self._base_args() + [
            "-i", "-X", "POST", "-d", body, "-H", XML_CONTENT_TYPE,
            self.profile_url("promote"),
        ]

    def status_args(self, repository_id: str) -> List[str]:
        return self._base_args() + [
            "-X", "GET", "-H", XML_CONTENT_TYPE, self.repository_url(repository_id),
        ]

    def activity_args(self, repository_id: str) -> List[str]:
        return self._base_args() + [
            "-X", "GET", "-H", XML_CONTENT_TYPE,
            f"{self.repository_url(repository_id)}/activity",
        ]

    def upload_args(self, repository_id: str, module: str, file_path: Path) -> List[str]:
        # --fail turns HTTP errors into a non-zero exit
        return self._base_args() + [
            "--fail", "--upload-file", str(file_path),
            self.deploy_url(repository_id, module, file_path.name),
        ]

    # Requests

    def display(self, args: List[str]) -> str:
        """Masked form of a command line"""
        return mask(args, self.config.secrets)

    def _run(self, args: List[str]) -> str:
        return self.gateway.run(args, self.config.secrets)

    def start(self) -> str:
        """POST /staging/profiles/{profile}/start"""
        return self._run(self.start_args())

    def finish(self, repository_id: str) -> str:
        """POST /staging/profiles/{profile}/finish"""
        return self._run(self.finish_args(repository_id))

    def promote(self, repository_id: str) -> str:
        """POST /staging/profiles/{profile}/promote, with response headers"""
        return self._run(self.promote_args(repository_id))

    def repository_status(self, repository_id: str) -> str:
        """GET /staging/repository/{id}"""
        return self._run(self.status_args(repository_id))

    def repository_activity(self, repository_id: str) -> str:
        """GET /staging/repository/{id}/activity"""
        return self._run(self.activity_args(repository_id))

    def upload(self, repository_id: str, module: str, file_path: Path) -> str:
        """PUT a file into the staging repository"""
        return self._run(self.upload_args(repository_id, module, file_path))
