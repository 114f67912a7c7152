"""Artifact file model"""

from dataclasses import dataclass
from pathlib import Path
from typing import List

from ..constants import COMPANION_SUFFIXES, MD5_SUFFIX, SHA1_SUFFIX, SIGNATURE_SUFFIX


def is_companion(path: Path) -> bool:
    """Check whether a file is a checksum or signature companion"""
    return path.name.endswith(COMPANION_SUFFIXES)


@dataclass(frozen=True)
class ArtifactFile:
    """A build output belonging to one module"""

    path: Path
    module: str

    @property
    def name(self) -> str:
        return self.path.name

    def companion(self, suffix: str) -> Path:
        return self.path.with_name(self.path.name + suffix)

    @property
    def md5_path(self) -> Path:
        return self.companion(MD5_SUFFIX)

    @property
    def sha1_path(self) -> Path:
        return self.companion(SHA1_SUFFIX)

    @property
    def signature_path(self) -> Path:
        return self.companion(SIGNATURE_SUFFIX)

    @property
    def companions(self) -> List[Path]:
        """All companion files, in generation order"""
        return [self.companion(suffix) for suffix in COMPANION_SUFFIXES]
