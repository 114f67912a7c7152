"""Checksum and GPG signature generation"""

import logging
import re
from pathlib import Path
from typing import List, Optional

from ..api.exceptions import ProcessError, SigningError
from ..constants import (
    GPG_BINARY,
    MD5_BINARY,
    SHA1_BINARY,
    MD5_PATTERN,
    SHA1_PATTERN,
)
from ..models.artifact import ArtifactFile
from ..models.config import ReleaseConfiguration
from ..utils.file_utils import list_files, remove_companion_files, write_text
from ..utils.process import ProcessGateway

logger = logging.getLogger(__name__)


class ArtifactSigner:
    """Regenerates .md5, .sha1 and .asc companions for every module artifact"""

    def __init__(self, config: ReleaseConfiguration,
                 gateway: Optional[ProcessGateway] = None):
        """
        Initialize signer

        Args:
            config: Release configuration (module names, GPG passphrase)
            gateway: Process gateway used to run md5sum, sha1sum and gpg
        """
        self.config = config
        self.gateway = gateway or ProcessGateway()

    def sign(self, artifact_root: Path) -> List[ArtifactFile]:
        """
        Sign all artifacts of the configured modules

        Old companion files are removed from a module before any new one is
        written, so a module always ends up with a complete set.

        Args:
            artifact_root: Directory holding one sub-directory per module

        Returns:
            Artifacts that were checksummed and signed

        Raises:
            SigningError: On the first file that cannot be processed
        """
        artifact_root = Path(artifact_root)
        signed = []

        for module in self.config.module_names:
            module_path = artifact_root / module
            if not module_path.is_dir():
                raise SigningError(f"Module directory not found: {module_path}")

            remove_companion_files(module_path)

            for path in list_files(module_path):
                artifact = ArtifactFile(path=path, module=module)
                self.sign_file(artifact)
                signed.append(artifact)

        logger.info(f"Checksummed and signed {len(signed)} artifact(s)")
        return signed

    def sign_file(self, artifact: ArtifactFile) -> None:
        """Write checksums and a detached signature for one artifact"""
        md5 = self._checksum(MD5_BINARY, MD5_PATTERN, artifact.path)
        write_text(artifact.md5_path, md5)

        sha1 = self._checksum(SHA1_BINARY, SHA1_PATTERN, artifact.path)
        write_text(artifact.sha1_path, sha1)

        args = [
            GPG_BINARY, "--batch", "--pinentry-mode", "loopback",
            "--passphrase", self.config.gpg_passphrase,
            "-ab", str(artifact.path),
        ]
        try:
            self.gateway.run(args, self.config.secrets)
        except ProcessError as e:
            raise SigningError(
                f"gpg failed to sign {artifact.path}",
                command=e.command,
                response=e.response,
            ) from e

    def _checksum(self, binary: str, pattern: re.Pattern, path: Path) -> str:
        try:
            output = self.gateway.run([binary, str(path)])
        except ProcessError as e:
            raise SigningError(
                f"{binary} failed for {path}",
                command=e.command,
                response=e.response,
            ) from e

        match = pattern.search(output)
        if match is None:
            raise SigningError(
                f"No checksum found in {binary} output for {path}",
                command=f"{binary} {path}",
                response=output,
            )
        return match.group(1)
