"""Unit tests for Kickoff configuration (kickoff.config).

Tests cover:
- AdvisorConfig defaults and bounds
- UserDefaults validation, save/load round trip, missing and corrupt files
- Config defaults and Config.from_env (saved defaults overlaid by KICKOFF_* variables)
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from kickoff.config import AdvisorConfig, Config, UserDefaults

pytestmark = pytest.mark.unit


class TestAdvisorConfig:
    def test_defaults(self):
        advisor = AdvisorConfig()
        assert advisor.url == "http://localhost:11434"
        assert advisor.model == "llama3.1:8b"
        assert advisor.timeout == 60
        assert advisor.confidence_threshold == 0.7

    def test_timeout_minimum(self):
        with pytest.raises(ValidationError):
            AdvisorConfig(timeout=2)

    def test_threshold_bounds(self):
        with pytest.raises(ValidationError):
            AdvisorConfig(confidence_threshold=1.5)
        with pytest.raises(ValidationError):
            AdvisorConfig(confidence_threshold=-0.1)


class TestUserDefaults:
    def test_defaults(self):
        defaults = UserDefaults()
        assert defaults.package_manager == "npm"
        assert defaults.license == "MIT"
        assert defaults.skip_git is False

    def test_unknown_package_manager_rejected(self):
        with pytest.raises(ValidationError):
            UserDefaults(package_manager="cargo")

    def test_save_and_load(self, tmp_path: Path):
        target = tmp_path / "nested" / "defaults.json"
        original = UserDefaults(package_manager="pnpm", author="Ada", skip_install=True)
        written = original.save(target)

        assert written == target
        assert json.loads(target.read_text(encoding="utf-8"))["package_manager"] == "pnpm"
        assert UserDefaults.load(target) == original

    def test_missing_file_yields_defaults(self, tmp_path: Path):
        assert UserDefaults.load(tmp_path / "absent.json") == UserDefaults()

    def test_corrupt_file_yields_defaults(self, tmp_path: Path):
        target = tmp_path / "defaults.json"
        target.write_text("{not json", encoding="utf-8")
        assert UserDefaults.load(target) == UserDefaults()

    def test_invalid_values_yield_defaults(self, tmp_path: Path):
        target = tmp_path / "defaults.json"
        target.write_text(json.dumps({"package_manager": "cargo"}), encoding="utf-8")
        assert UserDefaults.load(target) == UserDefaults()


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert config.use_advisor is False
        assert isinstance(config.advisor, AdvisorConfig)
        assert isinstance(config.defaults, UserDefaults)

    def test_from_env_empty(self, monkeypatch, tmp_path: Path):
        for key in (
            "KICKOFF_USE_ADVISOR",
            "KICKOFF_OLLAMA_URL",
            "KICKOFF_OLLAMA_MODEL",
            "KICKOFF_OLLAMA_TIMEOUT",
            "KICKOFF_CONFIDENCE_THRESHOLD",
            "KICKOFF_PACKAGE_MANAGER",
            "KICKOFF_AUTHOR",
            "KICKOFF_LICENSE",
            "KICKOFF_GITHUB_USERNAME",
            "KICKOFF_VERBOSE",
        ):
            monkeypatch.delenv(key, raising=False)
        assert Config.from_env(defaults_path=tmp_path / "absent.json") == Config()

    def test_from_env_overrides(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("KICKOFF_USE_ADVISOR", "yes")
        monkeypatch.setenv("KICKOFF_OLLAMA_URL", "http://gpu-box:11434")
        monkeypatch.setenv("KICKOFF_OLLAMA_MODEL", "qwen2.5:7b")
        monkeypatch.setenv("KICKOFF_OLLAMA_TIMEOUT", "30")
        monkeypatch.setenv("KICKOFF_CONFIDENCE_THRESHOLD", "0.85")
        monkeypatch.setenv("KICKOFF_PACKAGE_MANAGER", "bun")
        monkeypatch.setenv("KICKOFF_AUTHOR", "Grace")
        monkeypatch.setenv("KICKOFF_VERBOSE", "1")

        config = Config.from_env(defaults_path=tmp_path / "absent.json")

        assert config.use_advisor is True
        assert config.advisor.url == "http://gpu-box:11434"
        assert config.advisor.model == "qwen2.5:7b"
        assert config.advisor.timeout == 30
        assert config.advisor.confidence_threshold == 0.85
        assert config.defaults.package_manager == "bun"
        assert config.defaults.author == "Grace"
        assert config.defaults.verbose is True

    def test_from_env_invalid_value_raises(self, monkeypatch):
        monkeypatch.setenv("KICKOFF_OLLAMA_TIMEOUT", "1")
        with pytest.raises(ValidationError):
            Config.from_env()

    def test_from_env_starts_from_saved_defaults(self, monkeypatch, tmp_path: Path):
        for key in ("KICKOFF_AUTHOR", "KICKOFF_LICENSE", "KICKOFF_PACKAGE_MANAGER"):
            monkeypatch.delenv(key, raising=False)
        target = UserDefaults(author="Ada", license="Apache-2.0", package_manager="pnpm").save(
            tmp_path / "defaults.json"
        )

        config = Config.from_env(defaults_path=target)

        assert config.defaults.author == "Ada"
        assert config.defaults.license == "Apache-2.0"
        assert config.defaults.package_manager == "pnpm"

    def test_env_overrides_saved_defaults(self, monkeypatch, tmp_path: Path):
        monkeypatch.delenv("KICKOFF_LICENSE", raising=False)
        monkeypatch.setenv("KICKOFF_AUTHOR", "Grace")
        target = UserDefaults(author="Ada", license="Apache-2.0").save(tmp_path / "defaults.json")

        config = Config.from_env(defaults_path=target)

        assert config.defaults.author == "Grace"
        assert config.defaults.license == "Apache-2.0"

    def test_from_env_reads_default_location(self, monkeypatch, tmp_path: Path):
        monkeypatch.delenv("KICKOFF_AUTHOR", raising=False)
        target = tmp_path / "defaults.json"
        UserDefaults(author="Linus").save(target)
        monkeypatch.setattr("kickoff.config.DEFAULT_DEFAULTS_PATH", target)

        assert Config.from_env().defaults.author == "Linus"
