# ossrh_release/utils/__init__.py
"""Utility functions for ossrh-release"""

from .process import ProcessGateway, mask
from .xml_parser import (
    extract_status,
    extract_failure_messages,
    extract_staged_repository_id,
    extract_http_status,
)
from .file_utils import (
    list_files,
    remove_companion_files,
    write_text,
    marker_path,
    write_repository_marker,
    read_repository_marker,
)

__all__ = [
    "ProcessGateway",
    "mask",
    "extract_status",
    "extract_failure_messages",
    "extract_staged_repository_id",
    "extract_http_status",
    "list_files",
    "remove_companion_files",
    "write_text",
    "marker_path",
    "write_repository_marker",
    "read_repository_marker",
]
