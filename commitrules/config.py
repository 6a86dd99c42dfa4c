"""Configuration management for commitrules."""
from pathlib import Path
from datetime import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, Field
from rich.console import Console
from rich.markup import escape
import tomli
import tomli_w
import os
import re

from .defaults import CONFIGURATION
from .models import LintConfiguration, RuleSetting

DEFAULT_CONFIG_FILENAME = ".commitrules.toml"
SECTION = "commitrules"

_STRING_FIELDS = ['output_format', 'output_file', 'log_file', 'formatter']
_PATH_FIELDS = ['output_file', 'log_file']

console = Console(stderr=True)


class Settings(BaseModel):
    """Settings for commitrules.

    Values come from the ``[commitrules]`` table of the config file,
    from ``COMMITRULES_*`` environment variables, or from the command line.
    Rule overrides live in ``[commitrules.rules]`` and use the commitlint
    list form, e.g. ``body-max-line-length = [2, "always", 72]``.
    """

    output_format: str = Field(
        default="js",
        description="Format of the exported configuration (js or json)"
    )

    output_file: Optional[str] = Field(
        default=None,
        description="Output file relative to the repository root (defaults per format)"
    )

    always_log: bool = Field(
        default=False,
        description="Whether to always generate log files"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Path to log file (if not using automatic log file generation)"
    )

    extends: Optional[List[str]] = Field(
        default=None,
        description="Presets to extend instead of the shipped ones"
    )

    formatter: Optional[str] = Field(
        default=None,
        description="Formatter to use instead of the shipped one"
    )

    rules: Dict[str, RuleSetting] = Field(
        default_factory=dict,
        description="Rule overrides applied on top of the shipped rules"
    )

    @staticmethod
    def _sanitize_string(value: str) -> str:
        """Sanitize string values to prevent injection attacks."""
        if not value:
            return value

        # Remove control characters and null bytes
        value = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', value)

        # Cut at the first shell metacharacter
        value = re.split(r'[;&|`$()]', value)[0]

        if len(value) > 1000:
            value = value[:1000]

        return value.strip()

    @staticmethod
    def _is_safe_path(path: str) -> bool:
        """Check if a path is safe (relative, no traversal)."""
        if not path:
            return False

        if '..' in path or path.startswith('/') or '\\' in path:
            return False

        if os.path.isabs(path):
            return False

        return True

    @classmethod
    def _clean(cls, data: dict) -> dict:
        for key in _STRING_FIELDS:
            if isinstance(data.get(key), str):
                data[key] = cls._sanitize_string(data[key])

        for key in _PATH_FIELDS:
            if data.get(key) and not cls._is_safe_path(data[key]):
                console.print(f"[yellow]Warning: Unsafe {key} path '{escape(str(data[key]))}', using default[/yellow]")
                data[key] = None
        return data

    @classmethod
    def load(cls, repo_path: Path) -> 'Settings':
        """Load settings from the config file.

        Args:
            repo_path: Path to the repository root

        Returns:
            Settings: values from the file, or defaults
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        if not config_path.exists():
            return cls()

        try:
            with config_path.open('rb') as f:
                config_data = tomli.load(f)

            section = config_data.get(SECTION, {})
            if not isinstance(section, dict):
                raise ValueError(f"[{SECTION}] must be a table")

            return cls(**section)
        except Exception as e:
            # If there's any error reading the config, use defaults
            console.print(f"[yellow]Warning: Error reading config file: {escape(str(e))}[/yellow]")
            return cls()

    def save(self, repo_path: Path) -> None:
        """Save settings to the config file.

        Args:
            repo_path: Path to the repository root
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        section = {
            k: v for k, v in self.model_dump(exclude={'rules'}).items() if v is not None
        }
        section['rules'] = {name: setting.as_list() for name, setting in self.rules.items()}

        with config_path.open('wb') as f:
            tomli_w.dump({SECTION: section}, f)

    def get_log_file(self) -> Optional[Path]:
        """Get the path to the log file.

        If always_log is True, generates a timestamped log file name.
        Otherwise, returns the configured log_file path if set.
        """
        if self.always_log:
            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            return Path(f"commitrules-{timestamp}.log")
        elif self.log_file:
            return Path(self.log_file)
        return None

    def build_configuration(self, base: LintConfiguration = CONFIGURATION) -> LintConfiguration:
        """Apply the overrides in these settings to ``base``."""
        configuration = base.with_rules(self.rules)
        if self.extends is not None or self.formatter:
            configuration = LintConfiguration(
                extends=self.extends if self.extends is not None else configuration.extends,
                formatter=self.formatter or configuration.formatter,
                rules=dict(configuration.rules),
            )
        return configuration

    def __init__(self, **data):
        """Initialize settings with environment variable support and sanitization."""
        env_data = {}

        env_mapping = {
            'COMMITRULES_OUTPUT_FORMAT': 'output_format',
            'COMMITRULES_OUTPUT_FILE': 'output_file',
            'COMMITRULES_ALWAYS_LOG': 'always_log',
            'COMMITRULES_LOG_FILE': 'log_file',
        }

        for env_var, field_name in env_mapping.items():
            if env_var in os.environ:
                value = os.environ[env_var]

                if field_name == 'always_log':
                    value = value.lower() in ['true', '1', 'yes', 'on']

                env_data[field_name] = value

        merged_data = self._clean({**env_data, **data})

        super().__init__(**merged_data)
