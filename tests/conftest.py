"""Shared test configuration and fixtures for the ossrh-release test suite."""

from pathlib import Path

import pytest

from ossrh_release.api.exceptions import ProcessError
from ossrh_release.constants import FIELD_SOURCES, ENV_CONFIG_PATH, ENV_LOG_LEVEL
from ossrh_release.models import ReleaseConfiguration, PollingPolicy

MD5_OUTPUT = "0cc175b9c0f1b6a831c399e269772661  {path}\n"
SHA1_OUTPUT = "86f7e437faa5a7fce15d1ddcb9eaeaea377667b8  {path}\n"

MODULES = ("parent", "core")


def status_xml(status: str) -> str:
    return (
        "<stagingProfileRepository>\n"
        "  <profileId>abc123</profileId>\n"
        f"  <type>{status}</type>\n"
        "  <policy>release</policy>\n"
        "</stagingProfileRepository>\n"
    )


def start_xml(repository_id: str) -> str:
    return (
        "<promoteResponse><data>"
        f"<stagedRepositoryId>{repository_id}</stagedRepositoryId>"
        "<description>java-debug-1.0.0</description>"
        "</data></promoteResponse>"
    )


def activity_xml(*messages: str) -> str:
    properties = "".join(
        "<stagingProperty>\n"
        "  <name>failureMessage</name>\n"
        f"  <value>{message}</value>\n"
        "</stagingProperty>\n"
        for message in messages
    )
    return (
        "<list><stagingActivity><name>close</name><events><stagingActivityEvent>\n"
        "<name>rulesFailed</name><properties>\n"
        "<stagingProperty>\n  <name>typeId</name>\n  <value>sources-staging</value>\n</stagingProperty>\n"
        f"{properties}"
        "</properties></stagingActivityEvent></events></stagingActivity></list>\n"
    )


def classify(args):
    """Name the kind of request an argument list represents"""
    tool = args[0]
    if tool in ("md5sum", "sha1sum", "gpg"):
        return tool
    url = args[-1]
    if "--upload-file" in args:
        return "upload"
    for action in ("start", "finish", "promote", "activity"):
        if url.endswith("/" + action):
            return action
    if "/staging/repository/" in url:
        return "status"
    return tool


class FakeGateway:
    """Stands in for ProcessGateway

    Responses are queued per request kind; the last queued response for a
    kind is repeated once the queue is down to one entry. An exception
    instance in the queue is raised instead of returned.
    """

    def __init__(self):
        self.calls = []
        self.secrets_seen = []
        self.queues = {}

    def respond(self, kind, *responses):
        self.queues.setdefault(kind, []).extend(responses)
        return self

    def kinds(self):
        return [classify(args) for args in self.calls]

    def calls_of(self, kind):
        return [args for args in self.calls if classify(args) == kind]

    def run(self, args, secrets=()):
        args = [str(a) for a in args]
        self.calls.append(args)
        self.secrets_seen.append(list(secrets))
        kind = classify(args)

        queue = self.queues.get(kind)
        if queue:
            response = queue.pop(0) if len(queue) > 1 else queue[0]
        else:
            response = self._default(kind, args)

        if isinstance(response, Exception):
            raise response
        return response

    @staticmethod
    def _default(kind, args):
        if kind == "md5sum":
            return MD5_OUTPUT.format(path=args[-1])
        if kind == "sha1sum":
            return SHA1_OUTPUT.format(path=args[-1])
        if kind == "gpg":
            path = Path(args[-1])
            path.with_name(path.name + ".asc").write_text("-----BEGIN PGP SIGNATURE-----\n")
            return ""
        if kind == "promote":
            return "HTTP/1.1 201 Created\r\nContent-Length: 0\r\n\r\n"
        return ""


def process_error(output="curl: (22) The requested URL returned error: 401"):
    return ProcessError("curl exited with status 22", command="curl -u **:** ...",
                        output=output, returncode=22)


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def no_sleep():
    waits = []
    return waits.append, waits


@pytest.fixture
def artifact_root(tmp_path):
    root = tmp_path / "artifacts"
    for module in MODULES:
        module_dir = root / module
        module_dir.mkdir(parents=True)
        (module_dir / f"{module}-1.0.0.pom").write_text(f"<project>{module}</project>")
        if module != "parent":
            (module_dir / f"{module}-1.0.0.jar").write_bytes(b"PK\x03\x04jar")
    return root


@pytest.fixture
def config(artifact_root):
    return ReleaseConfiguration(
        username="deployer",
        password="s3cret",
        staging_profile_id="abc123",
        gpg_passphrase="passphrase",
        artifact_folder=artifact_root,
        release_version="1.0.0",
        group_id="com.example",
        project_name="example",
        module_names=MODULES,
        close_polling=PollingPolicy(max_attempts=10, delay=6),
        promote_polling=PollingPolicy(max_attempts=10, delay=6),
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable the tool reads from the environment"""
    for name in list(FIELD_SOURCES.values()) + [ENV_CONFIG_PATH, ENV_LOG_LEVEL]:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
