"""Global constants for ossrh-release"""

import re

APP_NAME = "ossrh-release"
LOG_FORMAT = "%(message)s"

# Tasks accepted by the dispatcher
TASK_GPG = "gpg"
TASK_UPLOAD = "upload"
TASK_PROMOTE = "promote"
TASKS = (TASK_GPG, TASK_UPLOAD, TASK_PROMOTE)

# Nexus OSSRH
DEFAULT_NEXUS_URL = "https://oss.sonatype.org"
SERVICE_PATH = "service/local"
STAGING_CONTENT_PATH = "content/repositories"
PUBLIC_GROUP_PATH = "content/groups/public"

# Project defaults
DEFAULT_GROUP_ID = "com.microsoft.java"
DEFAULT_PROJECT_NAME = "java-debug"
DEFAULT_MODULE_NAMES = (
    "java-debug-parent",
    "com.microsoft.java.debug.core",
    "com.microsoft.java.debug.plugin",
)

# Polling
DEFAULT_CLOSE_MAX_ATTEMPTS = 10
DEFAULT_CLOSE_DELAY = 6  # seconds
DEFAULT_PROMOTE_MAX_ATTEMPTS = 10
DEFAULT_PROMOTE_DELAY = 6  # seconds

# Files
PROJECT_CONFIG_FILE = ".ossrh-release.yaml"
STAGING_REPO_MARKER_FILE = ".stagingRepoId"

# Companion files, in generation order
MD5_SUFFIX = ".md5"
SHA1_SUFFIX = ".sha1"
SIGNATURE_SUFFIX = ".asc"
COMPANION_SUFFIXES = (MD5_SUFFIX, SHA1_SUFFIX, SIGNATURE_SUFFIX)

# External tools
CURL_BINARY = "curl"
GPG_BINARY = "gpg"
MD5_BINARY = "md5sum"
SHA1_BINARY = "sha1sum"
MASK = "**"
# Options whose following argument is a credential
CREDENTIAL_OPTIONS = ("-u", "--user")
SECRET_OPTIONS = ("--passphrase",)

# Environment variables
ENV_USER = "NEXUS_OSSRHUSER"
ENV_PASSWORD = "NEXUS_OSSRHPASS"
ENV_STAGING_PROFILE_ID = "NEXUS_STAGINGPROFILEID"
ENV_STAGING_REPO_ID = "NEXUS_STAGINGREPOID"
ENV_GPG_PASSPHRASE = "GPGPASS"
ENV_ARTIFACT_FOLDER = "artifactFolder"
ENV_RELEASE_VERSION = "releaseVersion"
ENV_CONFIG_PATH = "OSSRH_RELEASE_CONFIG"
ENV_LOG_LEVEL = "OSSRH_RELEASE_LOG_LEVEL"

# Configuration field -> environment variable that supplies it
FIELD_SOURCES = {
    "username": ENV_USER,
    "password": ENV_PASSWORD,
    "staging_profile_id": ENV_STAGING_PROFILE_ID,
    "staging_repository_id": ENV_STAGING_REPO_ID,
    "gpg_passphrase": ENV_GPG_PASSPHRASE,
    "artifact_folder": ENV_ARTIFACT_FOLDER,
    "release_version": ENV_RELEASE_VERSION,
}

# Required configuration per task, checked in this order
REQUIRED_FIELDS = {
    TASK_GPG: ("artifact_folder", "gpg_passphrase"),
    TASK_UPLOAD: (
        "release_version",
        "artifact_folder",
        "username",
        "password",
        "staging_profile_id",
        "gpg_passphrase",
    ),
    TASK_PROMOTE: (
        "username",
        "password",
        "staging_profile_id",
        "staging_repository_id",
    ),
}

# Response patterns
STAGED_REPOSITORY_ID_PATTERN = re.compile(
    r"<stagedRepositoryId>([a-zA-Z0-9-_]+)</stagedRepositoryId>"
)
STATUS_PATTERN = re.compile(r"<type>([a-zA-Z0-9-_.]+)</type>")
FAILURE_MESSAGE_PATTERN = re.compile(
    r"<name>failureMessage</name>\s*<value>(.*?)</value>", re.DOTALL
)
HTTP_STATUS_PATTERN = re.compile(r"^HTTP/[0-9.]+\s+(\d{3})", re.MULTILINE)
MD5_PATTERN = re.compile(r"([a-z0-9]{32})")
SHA1_PATTERN = re.compile(r"([a-z0-9]{40})")


# Error codes
class ErrorCode:
    CONFIGURATION_MISSING = "OR001"
    PROCESS_FAILED = "OR002"
    PARSE_FAILED = "OR003"
    SIGNING_FAILED = "OR004"
    CREATION_FAILED = "OR005"
    DEPLOY_FAILED = "OR006"
    CLOSE_TIMEOUT = "OR007"
    PROMOTE_FAILED = "OR008"
    PROMOTE_TIMEOUT = "OR009"


# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ERROR = "✗"

USAGE = (
    "Usage: ossrh-release -task [gpg|upload|promote]\n"
    "\n"
    "  gpg      Sign artifacts with GPG.\n"
    "  upload   Upload artifacts to a nexus staging repo.\n"
    "  promote  Promote a repo to get it picked up by Maven Central."
)
