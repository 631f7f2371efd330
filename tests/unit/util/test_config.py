"""Tests for derived settings."""

from hub.config import Settings


def test_local_frontend_uses_dev_server():
    settings = Settings(environment="development", frontend_host="localhost")

    assert settings.api.frontend_url == "http://localhost:3000"
    assert settings.api.cors_origins == [
        "http://localhost:3000",
        "http://localhost:5173",
    ]


def test_production_links_use_https(tmp_path):
    """Invitation links and CORS follow the configured frontend host."""
    settings = Settings(
        environment="production",
        frontend_host="research-hub.org",
        version_file=tmp_path / "missing.txt",
    )

    assert settings.api.frontend_url == "https://research-hub.org"
    assert settings.api.cors_origins[0] == "https://research-hub.org"
    assert settings.git_sha == "unknown"


def test_git_sha_read_from_version_file(tmp_path):
    version_file = tmp_path / "version.txt"
    version_file.write_text("3f1c9a2\n")

    assert Settings(version_file=version_file).git_sha == "3f1c9a2"
