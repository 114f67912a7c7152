"""End-to-end tests for the command line dispatcher."""

import logging

import pytest
from click.testing import CliRunner

from ossrh_release.cli.main import cli
from conftest import status_xml, start_xml, activity_xml

PROJECT_FILE = (
    "group_id: com.example\n"
    "project_name: example\n"
    "modules:\n"
    "  - parent\n"
    "  - core\n"
)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def workdir(tmp_path, clean_env):
    clean_env.chdir(tmp_path)
    (tmp_path / ".ossrh-release.yaml").write_text(PROJECT_FILE)
    return tmp_path


@pytest.fixture
def fake_tools(clean_env, gateway):
    """Route every external call to the fake gateway and skip sleeping"""
    waits = []
    clean_env.setattr("ossrh_release.services.release_service.ProcessGateway", lambda: gateway)
    clean_env.setattr("ossrh_release.services.release_service.time.sleep", waits.append)
    return waits


@pytest.fixture
def no_subprocess(clean_env):
    def fail(*args, **kwargs):
        raise AssertionError("external process started")
    clean_env.setattr("ossrh_release.utils.process.subprocess.run", fail)


@pytest.fixture
def upload_env(artifact_root):
    return {
        "NEXUS_OSSRHUSER": "deployer",
        "NEXUS_OSSRHPASS": "s3cret",
        "NEXUS_STAGINGPROFILEID": "abc123",
        "GPGPASS": "passphrase",
        "artifactFolder": str(artifact_root),
        "releaseVersion": "1.0.0",
    }


class TestDispatch:

    def test_unknown_task_prints_usage(self, runner, workdir, no_subprocess):
        result = runner.invoke(cli, ["-task", "deploy"])
        assert result.exit_code == 1
        assert "Unknown task: deploy" in result.output
        assert "Usage: ossrh-release -task [gpg|upload|promote]" in result.output

    def test_missing_task_prints_usage(self, runner, workdir, no_subprocess):
        result = runner.invoke(cli, [])
        assert result.exit_code == 1
        assert "Task not specified." in result.output

    def test_double_dash_form(self, runner, workdir, no_subprocess):
        result = runner.invoke(cli, ["--task", "gpg"])
        assert result.exit_code == 1
        assert "artifactFolder is not set." in result.output

    def test_missing_configuration(self, runner, workdir, no_subprocess, artifact_root):
        result = runner.invoke(cli, ["-task", "gpg"], env={"artifactFolder": str(artifact_root)})
        assert result.exit_code == 1
        assert "GPGPASS is not set." in result.output

    def test_invalid_project_file(self, runner, workdir, no_subprocess):
        (workdir / ".ossrh-release.yaml").write_text("modules: [parent\n")
        result = runner.invoke(cli, ["-task", "gpg"])
        assert result.exit_code == 1
        assert "Configuration Error" in result.output

    def test_malformed_project_value_stops_before_any_tool(self, runner, workdir, no_subprocess,
                                                           upload_env):
        content = PROJECT_FILE.replace("group_id: com.example", "group_id: null")
        (workdir / ".ossrh-release.yaml").write_text(content)
        result = runner.invoke(cli, ["-task", "upload"], env=upload_env)
        assert result.exit_code == 1
        assert "Configuration Error" in result.output
        assert "group_id" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output


class TestTasks:

    def test_gpg(self, runner, workdir, fake_tools, gateway, upload_env):
        result = runner.invoke(cli, ["-task", "gpg"], env=upload_env)
        assert result.exit_code == 0, result.output
        assert "Checksum and gpg sign finished." in result.output
        assert set(gateway.kinds()) == {"md5sum", "sha1sum", "gpg"}

    def test_upload_writes_marker(self, runner, workdir, fake_tools, gateway, upload_env):
        gateway.respond("start", start_xml("comexample-1000"))
        gateway.respond("status", status_xml("closed"))

        result = runner.invoke(cli, ["-task", "upload"], env=upload_env)

        assert result.exit_code == 0, result.output
        assert "comexample-1000" in result.output
        assert (workdir / ".stagingRepoId").read_text() == "comexample-1000"

    def test_close_timeout_end_to_end(self, runner, workdir, fake_tools, gateway, upload_env):
        gateway.respond("start", start_xml("comexample-1000"))
        gateway.respond("status", status_xml("open"))
        gateway.respond("activity", activity_xml("Missing Signature", "Invalid POM"))

        result = runner.invoke(cli, ["-task", "upload"], env=upload_env)

        assert result.exit_code == 1
        assert "See failure messages:" in result.output
        assert "Missing Signature" in result.output
        assert "Invalid POM" in result.output
        assert len(gateway.calls_of("status")) == 10
        assert fake_tools == [6] * 9
        assert gateway.calls_of("start")[0][-1].endswith("/staging/profiles/abc123/start")
        assert not (workdir / ".stagingRepoId").exists()

    def test_promote_uses_marker(self, runner, workdir, fake_tools, gateway):
        (workdir / ".stagingRepoId").write_text("comexample-1000\n")
        gateway.respond("status", status_xml("closed"), status_xml("released"))
        env = {
            "NEXUS_OSSRHUSER": "deployer",
            "NEXUS_OSSRHPASS": "s3cret",
            "NEXUS_STAGINGPROFILEID": "abc123",
        }

        result = runner.invoke(cli, ["-task", "promote"], env=env)

        assert result.exit_code == 0, result.output
        promote = gateway.calls_of("promote")[0]
        body = promote[promote.index("-d") + 1]
        assert "<stagedRepositoryId>comexample-1000</stagedRepositoryId>" in body
        assert "content/groups/public/com/example" in result.output

    def test_promote_failure_masks_credentials(self, runner, workdir, fake_tools, gateway):
        gateway.respond("promote", "HTTP/2 401 \r\n\r\nUnauthorized")
        env = {
            "NEXUS_OSSRHUSER": "deployer",
            "NEXUS_OSSRHPASS": "s3cret",
            "NEXUS_STAGINGPROFILEID": "abc123",
            "NEXUS_STAGINGREPOID": "comexample-1000",
        }

        result = runner.invoke(cli, ["-task", "promote"], env=env)

        assert result.exit_code == 1
        assert "HTTP 401" in result.output
        assert "s3cret" not in result.output


class TestOutputLevels:

    @pytest.fixture
    def restore_logging(self):
        yield
        logging.disable(logging.NOTSET)

    def test_quiet_success_prints_nothing(self, runner, workdir, fake_tools, upload_env,
                                          restore_logging):
        result = runner.invoke(cli, ["-task", "gpg", "-q"], env=upload_env)
        assert result.exit_code == 0, result.output
        assert result.output.strip() == ""

    def test_quiet_failure_still_reports(self, runner, workdir, fake_tools, gateway, upload_env,
                                         restore_logging):
        gateway.respond("md5sum", "")
        result = runner.invoke(cli, ["-task", "gpg", "-q"], env=upload_env)
        assert result.exit_code == 1
        assert "No checksum found" in result.output
        assert "Checksum and gpg sign" in result.output

    def test_debug_logs_masked_configuration_and_result(self, runner, workdir, fake_tools,
                                                        upload_env, caplog):
        caplog.set_level(logging.DEBUG, logger="ossrh_release.cli.main")
        result = runner.invoke(cli, ["-task", "gpg", "-d"], env=upload_env)
        assert result.exit_code == 0, result.output
        messages = [record.getMessage() for record in caplog.records
                    if record.name == "ossrh_release.cli.main"]
        assert any(m.startswith("Configuration: ") for m in messages)
        assert any(m.startswith("Result: ") and "'status': 'success'" in m for m in messages)
        assert "s3cret" not in caplog.text
        configuration = next(m for m in messages if m.startswith("Configuration"))
        assert "'gpg_passphrase': '**'" in configuration
