"""Unit tests for checksum and signature generation."""

import pytest

from ossrh_release.api.exceptions import SigningError
from ossrh_release.core.signer import ArtifactSigner
from conftest import process_error


def listing(root):
    return sorted(str(p.relative_to(root)) for p in root.rglob("*") if p.is_file())


class TestSign:

    def test_writes_full_companion_set(self, config, gateway, artifact_root):
        artifacts = ArtifactSigner(config, gateway).sign(artifact_root)

        assert [a.name for a in artifacts] == [
            "parent-1.0.0.pom", "core-1.0.0.jar", "core-1.0.0.pom",
        ]
        for artifact in artifacts:
            assert artifact.md5_path.read_text() == "0cc175b9c0f1b6a831c399e269772661"
            assert artifact.sha1_path.read_text() == "86f7e437faa5a7fce15d1ddcb9eaeaea377667b8"
            assert artifact.signature_path.exists()

    def test_gpg_invocation(self, config, gateway, artifact_root):
        ArtifactSigner(config, gateway).sign(artifact_root)
        gpg = gateway.calls_of("gpg")[0]
        assert gpg[:6] == ["gpg", "--batch", "--pinentry-mode", "loopback",
                           "--passphrase", "passphrase"]
        assert gpg[6] == "-ab"
        assert "passphrase" in gateway.secrets_seen[gateway.calls.index(gpg)]

    def test_stale_companions_are_removed_first(self, config, gateway, artifact_root):
        core = artifact_root / "core"
        (core / "old-0.9.jar.asc").write_text("stale")
        (core / "core-1.0.0.jar.md5").write_text("stale")

        ArtifactSigner(config, gateway).sign(artifact_root)

        assert not (core / "old-0.9.jar.asc").exists()
        assert (core / "core-1.0.0.jar.md5").read_text() != "stale"
        signed_paths = {args[-1] for args in gateway.calls_of("md5sum")}
        assert not any(p.endswith((".md5", ".sha1", ".asc")) for p in signed_paths)

    def test_signing_twice_gives_same_file_set(self, config, gateway, artifact_root):
        signer = ArtifactSigner(config, gateway)
        signer.sign(artifact_root)
        first = listing(artifact_root)
        signer.sign(artifact_root)
        assert listing(artifact_root) == first
        assert len(first) == 3 * 4

    def test_unparseable_checksum_aborts(self, config, gateway, artifact_root):
        gateway.respond("sha1sum", "sha1sum: read error\n")
        with pytest.raises(SigningError) as exc_info:
            ArtifactSigner(config, gateway).sign(artifact_root)
        assert "sha1sum" in str(exc_info.value)
        assert exc_info.value.response == "sha1sum: read error\n"
        assert gateway.calls_of("gpg") == []

    def test_gpg_failure_aborts(self, config, gateway, artifact_root):
        gateway.respond("gpg", process_error("gpg: signing failed: Bad passphrase"))
        with pytest.raises(SigningError) as exc_info:
            ArtifactSigner(config, gateway).sign(artifact_root)
        assert "Bad passphrase" in exc_info.value.response
        assert len(gateway.calls_of("gpg")) == 1

    def test_missing_module_directory(self, config, gateway, tmp_path):
        with pytest.raises(SigningError, match="Module directory not found"):
            ArtifactSigner(config, gateway).sign(tmp_path)
        assert gateway.calls == []
