"""Field extraction from Nexus staging API responses

The responses are scraped with regular expressions rather than parsed; only
a handful of known elements are ever read.
"""

from typing import List, Optional

from ..api.exceptions import ParseError
from ..constants import (
    STATUS_PATTERN,
    FAILURE_MESSAGE_PATTERN,
    STAGED_REPOSITORY_ID_PATTERN,
    HTTP_STATUS_PATTERN,
)


def extract_status(xml: str) -> str:
    """
    Extract the repository status token

    Args:
        xml: Body of GET /staging/repository/{id}

    Returns:
        Text of the first <type> element

    Raises:
        ParseError: If no <type> element is present
    """
    match = STATUS_PATTERN.search(xml or "")
    if match is None:
        raise ParseError("No <type> element found in repository status response", xml)
    return match.group(1)


def extract_failure_messages(xml: str) -> List[str]:
    """
    Extract failure messages from a repository activity feed

    Args:
        xml: Body of GET /staging/repository/{id}/activity

    Returns:
        Values of every failureMessage property, in document order
    """
    return FAILURE_MESSAGE_PATTERN.findall(xml or "")


def extract_staged_repository_id(xml: str) -> str:
    """Extract the id from a staging start response"""
    match = STAGED_REPOSITORY_ID_PATTERN.search(xml or "")
    if match is None:
        raise ParseError("No <stagedRepositoryId> element found in response", xml)
    return match.group(1)


def extract_http_status(text: str) -> Optional[int]:
    """Status code of the final HTTP status line in ``curl -i`` output"""
    codes = HTTP_STATUS_PATTERN.findall(text or "")
    if not codes:
        return None
    # curl prints one status line per response, e.g. after "100 Continue"
    return int(codes[-1])
