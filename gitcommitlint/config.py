"""Configuration management for gitcommitlint."""
from pathlib import Path
from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, ValidationError, field_validator
import tomli
import tomli_w
import os
import re
import sys

from .preset import get_preset
from .ruleset import RuleSet

DEFAULT_CONFIG_FILENAME = ".gitcommitlint.toml"
CONFIG_SECTION = "gitcommitlint"
DEFAULT_LOG_DIRECTORY = ".gitcommitlint"

class ConfigError(ValueError):
    """Raised when an explicitly requested configuration file cannot be used."""

class Config(BaseModel):
    """Configuration settings for gitcommitlint.

    Settings live in the ``[gitcommitlint]`` table of ``.gitcommitlint.toml``
    at the repository root. Rule overrides use the same
    ``[level, condition, value]`` lists as the presets::

        [gitcommitlint]
        locale = "en"

        [gitcommitlint.rules]
        header-max-length = [2, "always", 72]
        body-leading-blank = [0]
    """

    preset: str = Field(
        default="conventional",
        description="Name of the rule preset to start from"
    )

    parser_preset: Optional[str] = Field(
        default=None,
        description="Parser preset overriding the one named by the rule preset"
    )

    locale: Optional[str] = Field(
        default=None,
        description="Locale for violation messages (defaults to the preset's locale)"
    )

    default_ignores: bool = Field(
        default=True,
        description="Whether merge, revert, fixup and release commits are skipped"
    )

    ignores: List[str] = Field(
        default_factory=list,
        description="Regular expressions; matching messages are skipped"
    )

    help_url: Optional[str] = Field(
        default=None,
        description="URL printed below failing reports"
    )

    always_log: bool = Field(
        default=False,
        description="Whether to always write a timestamped log file"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Path to log file (if not using automatic log file generation)"
    )

    log_directory: Optional[str] = Field(
        default=None,
        description="Directory for automatic log files"
    )

    rules: Dict[str, Any] = Field(
        default_factory=dict,
        description="Rule overrides applied on top of the preset"
    )

    @field_validator("ignores")
    @classmethod
    def _check_ignores(cls, value: List[str]) -> List[str]:
        for pattern in value:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"invalid ignore pattern {pattern!r}: {e}") from e
        return value

    @staticmethod
    def _sanitize_string(value: str) -> str:
        """Strip control characters from string settings."""
        if not value:
            return value

        value = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', value)

        if len(value) > 1000:
            value = value[:1000]

        return value.strip()

    @staticmethod
    def _is_safe_path(path: str) -> bool:
        """Check if a path stays inside the repository (no traversal, no absolute paths)."""
        if not path:
            return False

        if '..' in path or path.startswith('/') or '\\' in path:
            return False

        if os.path.isabs(path):
            return False

        return True

    @classmethod
    def _from_data(cls, config_data: Dict[str, Any]) -> 'Config':
        section = dict(config_data.get(CONFIG_SECTION, {}))

        for key in ['preset', 'parser_preset', 'locale', 'help_url', 'log_file', 'log_directory']:
            if key in section and isinstance(section[key], str):
                section[key] = cls._sanitize_string(section[key])

        for key in ['log_file', 'log_directory']:
            if section.get(key) and not cls._is_safe_path(section[key]):
                print(f"Warning: Unsafe {key} path '{section[key]}', using default", file=sys.stderr)
                section[key] = None

        return cls(**section)

    @classmethod
    def load(cls, repo_path: Path) -> 'Config':
        """Load configuration from the repository's config file.

        A missing or unreadable file yields the defaults.

        Args:
            repo_path: Path to the git repository

        Returns:
            Config: Configuration object with values from file or defaults
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        if not config_path.exists():
            return cls()

        try:
            with config_path.open('rb') as f:
                config_data = tomli.load(f)
            return cls._from_data(config_data)
        except (tomli.TOMLDecodeError, ValidationError, OSError) as e:
            print(f"Warning: Error reading config file: {e}", file=sys.stderr)
            return cls()

    @classmethod
    def load_file(cls, config_path: Path) -> 'Config':
        """Load configuration from an explicit file.

        Raises:
            ConfigError: If the file cannot be read or holds invalid settings
        """
        try:
            with config_path.open('rb') as f:
                config_data = tomli.load(f)
            return cls._from_data(config_data)
        except (tomli.TOMLDecodeError, ValidationError, OSError) as e:
            raise ConfigError(f"Cannot load config file {config_path}: {e}") from e

    def save(self, repo_path: Path) -> None:
        """Save configuration to the config file.

        Args:
            repo_path: Path to the git repository
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        # Convert to dict and remove None values
        config_dict = {k: v for k, v in self.model_dump().items() if v is not None}

        for key in ['log_file', 'log_directory']:
            if config_dict.get(key) and not self._is_safe_path(config_dict[key]):
                print(f"Warning: Unsafe {key} path '{config_dict[key]}', not saving", file=sys.stderr)
                del config_dict[key]

        with config_path.open('wb') as f:
            tomli_w.dump({CONFIG_SECTION: config_dict}, f)

    def build_rule_set(self) -> RuleSet:
        """Apply the configured rule overrides to the preset.

        Raises:
            UnknownPresetError: If the preset name is not registered
            RuleConfigError: If a rule override is malformed
        """
        return get_preset(self.preset).merged(
            self.rules,
            parser_preset=self.parser_preset,
            locale=self.locale,
        )

    def get_log_file(self) -> Optional[Path]:
        """Get the path to the log file.

        If always_log is True, generates a timestamped log file name inside
        ``log_directory`` (``.gitcommitlint`` by default). Otherwise, returns
        the configured log_file path if set.

        Returns:
            Optional[Path]: Path to the log file, or None if logging is disabled
        """
        if self.always_log:
            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            directory = self.log_directory or DEFAULT_LOG_DIRECTORY
            if not self._is_safe_path(directory):
                print(f"Warning: Unsafe log directory '{directory}', using repository root", file=sys.stderr)
                directory = "."
            return Path(directory) / f"gcl_log-{timestamp}.log"
        elif self.log_file:
            if self._is_safe_path(self.log_file):
                return Path(self.log_file)
            print(f"Warning: Unsafe log file path '{self.log_file}', using default", file=sys.stderr)
            return None
        return None

    def __init__(self, **data):
        """Initialize config with environment variable support and sanitization."""
        env_data = {}

        env_mapping = {
            'GIT_COMMIT_LINT_PRESET': 'preset',
            'GIT_COMMIT_LINT_PARSER_PRESET': 'parser_preset',
            'GIT_COMMIT_LINT_LOCALE': 'locale',
            'GIT_COMMIT_LINT_DEFAULT_IGNORES': 'default_ignores',
            'GIT_COMMIT_LINT_HELP_URL': 'help_url',
            'GIT_COMMIT_LINT_ALWAYS_LOG': 'always_log',
            'GIT_COMMIT_LINT_LOG_FILE': 'log_file',
            'GIT_COMMIT_LINT_LOG_DIRECTORY': 'log_directory',
        }

        for env_var, field_name in env_mapping.items():
            if env_var in os.environ:
                value = self._sanitize_string(os.environ[env_var])

                if field_name in ['default_ignores', 'always_log']:
                    value = value.lower() in ['true', '1', 'yes', 'on']

                env_data[field_name] = value

        merged_data = {**data, **env_data}

        super().__init__(**merged_data)
