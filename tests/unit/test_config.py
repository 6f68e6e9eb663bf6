"""Tests for adforge.core.config — configuration management.

Tests cover:
- Default values for all configuration fields.
- Environment variable overrides via the ADFORGE_ prefix.
- API key aliases (GOOGLE_API_KEY, GEMINI_API_KEY) and secret handling.
- Resolution of relative output directories against the project root.
- Pydantic validation constraints (port range, log level, prompt length).
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from adforge.core.config import DEFAULT_MODEL_NAME, PROJECT_ROOT, AdforgeConfig

_KEY_VARS = ("ADFORGE_API_KEY", "GOOGLE_API_KEY", "GEMINI_API_KEY")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable that could leak into a config under test."""
    for name in (
        *_KEY_VARS,
        "ADFORGE_MODEL_NAME",
        "ADFORGE_OUTPUTS_DIR",
        "ADFORGE_SERVER_HOST",
        "ADFORGE_SERVER_PORT",
        "ADFORGE_LOG_LEVEL",
        "ADFORGE_MAX_PROMPT_LENGTH",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestConfigDefaults:
    """Verify that AdforgeConfig provides sensible defaults."""

    def test_default_model_name(self, clean_env):
        cfg = AdforgeConfig(_env_file=None)
        assert cfg.model_name == DEFAULT_MODEL_NAME == "gemini-2.5-flash-image-preview"

    def test_default_outputs_dir(self, clean_env):
        """Images go to generated-images under the project root."""
        cfg = AdforgeConfig(_env_file=None)
        assert cfg.outputs_dir == PROJECT_ROOT / "generated-images"

    def test_default_server_settings(self, clean_env):
        cfg = AdforgeConfig(_env_file=None)
        assert cfg.server_host == "127.0.0.1"
        assert cfg.server_port == 8765
        assert cfg.log_level == "INFO"

    def test_no_prompt_limit_by_default(self, clean_env):
        cfg = AdforgeConfig(_env_file=None)
        assert cfg.max_prompt_length is None

    def test_no_api_key_by_default(self, clean_env):
        cfg = AdforgeConfig(_env_file=None)
        assert cfg.api_key is None
        assert cfg.has_api_key is False

    def test_outputs_dir_not_created(self, clean_env, temp_dir: Path):
        """Loading configuration must not touch the filesystem."""
        target = temp_dir / "not-yet"
        AdforgeConfig(outputs_dir=target, _env_file=None)
        assert not target.exists()


class TestApiKey:
    """Verify credential loading and masking."""

    @pytest.mark.parametrize("var", _KEY_VARS)
    def test_key_read_from_each_alias(self, clean_env, var):
        clean_env.setenv(var, "secret-from-env")
        cfg = AdforgeConfig(_env_file=None)
        assert cfg.has_api_key
        assert cfg.api_key.get_secret_value() == "secret-from-env"

    def test_key_by_field_name(self, clean_env):
        cfg = AdforgeConfig(api_key="direct-key", _env_file=None)
        assert cfg.api_key.get_secret_value() == "direct-key"

    def test_empty_key_is_not_configured(self, clean_env):
        clean_env.setenv("GOOGLE_API_KEY", "")
        cfg = AdforgeConfig(_env_file=None)
        assert cfg.has_api_key is False

    def test_key_masked_in_repr(self, clean_env):
        cfg = AdforgeConfig(api_key="do-not-print", _env_file=None)
        assert "do-not-print" not in repr(cfg)
        assert "do-not-print" not in str(cfg.model_dump())


class TestEnvironmentOverrides:
    """Verify ADFORGE_-prefixed environment variables are honoured."""

    def test_model_name_override(self, clean_env):
        clean_env.setenv("ADFORGE_MODEL_NAME", "custom-model")
        assert AdforgeConfig(_env_file=None).model_name == "custom-model"

    def test_port_override(self, clean_env):
        clean_env.setenv("ADFORGE_SERVER_PORT", "9000")
        assert AdforgeConfig(_env_file=None).server_port == 9000

    def test_prompt_limit_override(self, clean_env):
        clean_env.setenv("ADFORGE_MAX_PROMPT_LENGTH", "2000")
        assert AdforgeConfig(_env_file=None).max_prompt_length == 2000

    def test_env_file_loaded(self, clean_env, temp_dir: Path):
        env_file = temp_dir / ".env"
        env_file.write_text("GEMINI_API_KEY=from-dotenv\nADFORGE_LOG_LEVEL=DEBUG\n")
        cfg = AdforgeConfig(_env_file=env_file)
        assert cfg.api_key.get_secret_value() == "from-dotenv"
        assert cfg.log_level == "DEBUG"


class TestOutputsDirResolution:
    """Verify relative and absolute output directories."""

    def test_relative_dir_anchored_to_project_root(self, clean_env):
        cfg = AdforgeConfig(outputs_dir="renders/out", _env_file=None)
        assert cfg.outputs_dir == PROJECT_ROOT / "renders" / "out"

    def test_absolute_dir_unchanged(self, clean_env, temp_dir: Path):
        cfg = AdforgeConfig(outputs_dir=str(temp_dir), _env_file=None)
        assert cfg.outputs_dir == temp_dir

    def test_user_dir_expanded(self, clean_env):
        cfg = AdforgeConfig(outputs_dir="~/adforge-images", _env_file=None)
        assert cfg.outputs_dir == Path.home() / "adforge-images"


class TestConfigValidation:
    """Verify Pydantic constraints."""

    @pytest.mark.parametrize("port", [80, 70000])
    def test_port_out_of_range(self, clean_env, port):
        with pytest.raises(ValidationError):
            AdforgeConfig(server_port=port, _env_file=None)

    def test_invalid_log_level(self, clean_env):
        with pytest.raises(ValidationError):
            AdforgeConfig(log_level="LOUD", _env_file=None)

    def test_prompt_limit_must_be_positive(self, clean_env):
        with pytest.raises(ValidationError):
            AdforgeConfig(max_prompt_length=0, _env_file=None)
