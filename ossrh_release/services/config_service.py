"""Configuration management service"""

import logging
import os
from pathlib import Path
from typing import Dict, Mapping, Optional, Any, Union

import yaml

from ..api.exceptions import ConfigurationError
from ..constants import (
    PROJECT_CONFIG_FILE,
    DEFAULT_NEXUS_URL,
    DEFAULT_GROUP_ID,
    DEFAULT_PROJECT_NAME,
    DEFAULT_MODULE_NAMES,
    ENV_USER,
    ENV_PASSWORD,
    ENV_STAGING_PROFILE_ID,
    ENV_STAGING_REPO_ID,
    ENV_GPG_PASSPHRASE,
    ENV_ARTIFACT_FOLDER,
    ENV_RELEASE_VERSION,
    ENV_CONFIG_PATH,
    REQUIRED_FIELDS,
)
from ..models.config import (
    ReleaseConfiguration,
    PollingPolicy,
    DEFAULT_CLOSE_POLLING,
    DEFAULT_PROMOTE_POLLING,
)
from ..utils.file_utils import read_repository_marker

logger = logging.getLogger(__name__)


class ConfigService:
    """Builds the release configuration from a project file and the environment"""

    def __init__(self, project_root: Optional[Path] = None,
                 config_path: Optional[Union[str, Path]] = None,
                 environ: Optional[Mapping[str, str]] = None):
        """Initialize config service

        Args:
            project_root: Directory holding the project file and marker
                (default: current directory)
            config_path: Explicit project file; must exist when given
            environ: Environment mapping (default: os.environ)
        """
        self.project_root = Path(project_root or Path.cwd())
        self.environ = os.environ if environ is None else environ

        explicit = config_path or self.environ.get(ENV_CONFIG_PATH)
        self.explicit_config = explicit is not None
        self.config_path = Path(explicit) if explicit else self.project_root / PROJECT_CONFIG_FILE

    def load_project_file(self) -> Dict[str, Any]:
        """Load the YAML project file

        Returns:
            Parsed content, or an empty dict when no file is present
        """
        if not self.config_path.exists():
            if self.explicit_config:
                raise ConfigurationError(f"Configuration file not found: {self.config_path}")
            return {}

        with open(self.config_path, 'r') as f:
            content = f.read()

        # Simple environment variable expansion
        content = os.path.expandvars(content)

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {self.config_path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"{self.config_path} must contain a mapping")

        logger.debug(f"Loaded project file {self.config_path}")
        return data

    def load(self) -> ReleaseConfiguration:
        """Build the release configuration

        Environment variables take precedence for credentials and per-run
        values; everything else comes from the project file or defaults.
        """
        data = self.load_project_file()
        env = self.environ

        modules = data.get("modules", DEFAULT_MODULE_NAMES)
        if not isinstance(modules, (list, tuple)) or not modules \
                or not all(isinstance(m, str) and m.strip() for m in modules):
            raise ConfigurationError("'modules' must be a list of module names", field="modules")

        insecure = data.get("insecure", True)
        if not isinstance(insecure, bool):
            raise ConfigurationError("'insecure' must be true or false", field="insecure")

        polling = data.get("polling") or {}
        try:
            close_polling = PollingPolicy.from_dict(polling.get("close"), DEFAULT_CLOSE_POLLING)
            promote_polling = PollingPolicy.from_dict(polling.get("promote"), DEFAULT_PROMOTE_POLLING)
        except (TypeError, ValueError, AttributeError) as e:
            raise ConfigurationError(f"Invalid polling configuration: {e}") from e

        artifact_folder = env.get(ENV_ARTIFACT_FOLDER) or _optional_string(data, "artifact_folder")
        profile_id = env.get(ENV_STAGING_PROFILE_ID) or _optional_string(data, "staging_profile_id")
        release_version = env.get(ENV_RELEASE_VERSION) or _optional_string(data, "release_version")

        return ReleaseConfiguration(
            username=env.get(ENV_USER),
            password=env.get(ENV_PASSWORD),
            staging_profile_id=profile_id,
            staging_repository_id=env.get(ENV_STAGING_REPO_ID),
            gpg_passphrase=env.get(ENV_GPG_PASSPHRASE),
            artifact_folder=Path(artifact_folder) if artifact_folder else None,
            release_version=release_version,
            group_id=_string(data, "group_id", DEFAULT_GROUP_ID),
            project_name=_string(data, "project_name", DEFAULT_PROJECT_NAME),
            module_names=tuple(modules),
            nexus_url=_string(data, "nexus_url", DEFAULT_NEXUS_URL),
            insecure=insecure,
            close_polling=close_polling,
            promote_polling=promote_polling,
        )

    def recover_repository_id(self, config: ReleaseConfiguration) -> ReleaseConfiguration:
        """Fill in the staging repository id from the marker file if unset"""
        if config.staging_repository_id:
            return config
        repository_id = read_repository_marker(self.project_root)
        if repository_id:
            logger.info(f"Using staging repository {repository_id} from marker file")
            return config.with_repository_id(repository_id)
        return config


def validate(config: ReleaseConfiguration, task: str) -> None:
    """
    Check that a task has everything it needs

    Args:
        config: Release configuration
        task: Task name

    Raises:
        ConfigurationError: Naming the first missing value
    """
    missing = config.missing(REQUIRED_FIELDS[task])
    if missing:
        field = missing[0]
        raise ConfigurationError(f"{config.source_of(field)} is not set.", field=field)


def _string(data: Dict[str, Any], key: str, default: str) -> str:
    value = data.get(key, default)
    if not isinstance(value, str) or not value.strip():
        raise ConfigurationError(f"'{key}' must be a non-empty string", field=key)
    return value


def _optional_string(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        # unquoted values such as 1.10 or 0123 do not survive YAML typing
        raise ConfigurationError(f"'{key}' must be a quoted string", field=key)
    return value
