"""Unit tests for application settings configuration."""

from pathlib import Path

from cms.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_relative_content_types_file_resolves_against_backend_dir():
    settings = Settings(content_types_file="data/content-types.yaml")
    expected = Path(__file__).resolve().parents[2] / "data" / "content-types.yaml"
    assert settings.content_types_path == expected
    assert settings.content_types_path.is_file()


def test_absolute_content_types_file_is_kept(tmp_path):
    target = tmp_path / "types.yaml"
    settings = Settings(content_types_file=str(target))
    assert settings.content_types_path == target


def test_environment_overrides_defaults(monkeypatch):
    monkeypatch.setenv("CONTENT_TYPES_FILE", "/srv/cms/types.yaml")
    monkeypatch.setenv("LOG_LEVEL_CONTENT", "DEBUG")
    settings = Settings()
    assert settings.content_types_file == "/srv/cms/types.yaml"
    assert settings.log_level_content == "DEBUG"
