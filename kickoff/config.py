"""Kickoff configuration.

Typed settings for the CLI layer: where the optional advisory reviewer
lives, and the per-user defaults remembered between runs.  The CLI reads the
saved defaults through ``Config.from_env``; author and license flow into the
generated package manifest.  Everything is a
Pydantic v2 model so values are validated at construction time and can be
serialised to and from JSON or environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError

DEFAULT_DEFAULTS_PATH = Path.home() / ".kickoff" / "defaults.json"

PackageManager = Literal["npm", "yarn", "pnpm", "bun"]

_TRUTHY = {"1", "true", "yes", "on"}


class AdvisorConfig(BaseModel):
    """Configuration for the local Ollama server used by the advisory reviewer."""

    url: str = Field(default="http://localhost:11434")
    model: str = Field(default="llama3.1:8b")
    timeout: int = Field(default=60, ge=5, description="Per-request timeout in seconds")
    confidence_threshold: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Advisory errors only block a stack above this confidence",
    )


class UserDefaults(BaseModel):
    """Answers the user does not want to give again on every run."""

    package_manager: PackageManager = Field(default="npm")
    author: str = Field(default="")
    license: str = Field(default="MIT")
    github_username: str = Field(default="")
    skip_git: bool = Field(default=False)
    skip_install: bool = Field(default=False)
    verbose: bool = Field(default=False)

    def save(self, path: Path | None = None) -> Path:
        """Persist the defaults to a JSON file.

        Args:
            path: Destination file. Defaults to ``~/.kickoff/defaults.json``.

        Returns:
            The path where the file was written.
        """
        target = path or DEFAULT_DEFAULTS_PATH
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path | None = None) -> UserDefaults:
        """Load previously-saved defaults.

        A missing, unreadable or invalid file yields the built-in defaults.
        """
        source = Path(path) if path is not None else DEFAULT_DEFAULTS_PATH
        try:
            raw = source.read_text(encoding="utf-8")
            return cls.model_validate_json(raw)
        except (OSError, ValidationError):
            return cls()


class Config(BaseModel):
    """Global Kickoff configuration.

    Created once by the CLI entry point and handed to ``Pipeline``.
    """

    advisor: AdvisorConfig = Field(default_factory=AdvisorConfig)
    defaults: UserDefaults = Field(default_factory=UserDefaults)
    use_advisor: bool = Field(default=False, description="Consult the advisory reviewer")

    @classmethod
    def from_env(cls, defaults_path: Path | None = None) -> Config:
        """Build a ``Config`` from saved defaults and environment variables.

        User defaults start from the file written by ``UserDefaults.save``
        (``~/.kickoff/defaults.json`` unless *defaults_path* is given);
        environment variables override individual fields.

        Recognised variables (all optional):
            KICKOFF_USE_ADVISOR, KICKOFF_OLLAMA_URL, KICKOFF_OLLAMA_MODEL,
            KICKOFF_OLLAMA_TIMEOUT, KICKOFF_CONFIDENCE_THRESHOLD,
            KICKOFF_PACKAGE_MANAGER, KICKOFF_AUTHOR, KICKOFF_LICENSE,
            KICKOFF_GITHUB_USERNAME, KICKOFF_VERBOSE.
        """
        advisor_kwargs: dict[str, Any] = {}
        if os.environ.get("KICKOFF_OLLAMA_URL"):
            advisor_kwargs["url"] = os.environ["KICKOFF_OLLAMA_URL"]
        if os.environ.get("KICKOFF_OLLAMA_MODEL"):
            advisor_kwargs["model"] = os.environ["KICKOFF_OLLAMA_MODEL"]
        if os.environ.get("KICKOFF_OLLAMA_TIMEOUT"):
            advisor_kwargs["timeout"] = int(os.environ["KICKOFF_OLLAMA_TIMEOUT"])
        if os.environ.get("KICKOFF_CONFIDENCE_THRESHOLD"):
            advisor_kwargs["confidence_threshold"] = float(
                os.environ["KICKOFF_CONFIDENCE_THRESHOLD"]
            )

        defaults_kwargs: dict[str, Any] = UserDefaults.load(defaults_path).model_dump()
        if os.environ.get("KICKOFF_PACKAGE_MANAGER"):
            defaults_kwargs["package_manager"] = os.environ["KICKOFF_PACKAGE_MANAGER"]
        if os.environ.get("KICKOFF_AUTHOR"):
            defaults_kwargs["author"] = os.environ["KICKOFF_AUTHOR"]
        if os.environ.get("KICKOFF_LICENSE"):
            defaults_kwargs["license"] = os.environ["KICKOFF_LICENSE"]
        if os.environ.get("KICKOFF_GITHUB_USERNAME"):
            defaults_kwargs["github_username"] = os.environ["KICKOFF_GITHUB_USERNAME"]
        if os.environ.get("KICKOFF_VERBOSE"):
            defaults_kwargs["verbose"] = os.environ["KICKOFF_VERBOSE"].lower() in _TRUTHY

        return cls(
            advisor=AdvisorConfig(**advisor_kwargs),
            defaults=UserDefaults(**defaults_kwargs),
            use_advisor=os.environ.get("KICKOFF_USE_ADVISOR", "").lower() in _TRUTHY,
        )
