# ossrh_release/utils/file_utils.py
"""File operation utilities"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from ..constants import STAGING_REPO_MARKER_FILE
from ..models.artifact import is_companion

logger = logging.getLogger(__name__)


def list_files(directory: Path) -> List[Path]:
    """
    List regular files directly inside a directory

    Args:
        directory: Directory path

    Returns:
        Files sorted by name
    """
    return sorted((p for p in directory.iterdir() if p.is_file()), key=lambda p: p.name)


def remove_companion_files(directory: Path) -> List[Path]:
    """
    Delete every checksum and signature file in a directory

    Args:
        directory: Module directory

    Returns:
        Paths that were removed
    """
    removed = []
    for path in list_files(directory):
        if is_companion(path):
            path.unlink()
            removed.append(path)
    if removed:
        logger.debug(f"Removed {len(removed)} stale companion file(s) from {directory}")
    return removed


def write_text(path: Path, content: str) -> None:
    """Write text to a file, replacing it"""
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)


def marker_path(directory: Optional[Union[str, Path]] = None) -> Path:
    """Location of the staging repository marker file"""
    return Path(directory or Path.cwd()) / STAGING_REPO_MARKER_FILE


def write_repository_marker(repository_id: str,
                            directory: Optional[Union[str, Path]] = None) -> Path:
    """
    Persist a staging repository id for later runs

    Args:
        repository_id: Staging repository id
        directory: Directory to write into (default: current directory)

    Returns:
        Path of the marker file
    """
    path = marker_path(directory)
    write_text(path, repository_id)
    logger.info(f"Staging repository id written to {path}")
    return path


def read_repository_marker(directory: Optional[Union[str, Path]] = None) -> Optional[str]:
    """Read a staging repository id left by a previous run, if any"""
    path = marker_path(directory)
    if not path.is_file():
        return None
    repository_id = path.read_text(encoding="utf-8").strip()
    return repository_id or None
