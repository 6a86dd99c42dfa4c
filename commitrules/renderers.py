"""Renderers that turn a lint configuration into files commitlint can load."""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Tuple, Union

from pydantic import ValidationError

from .errors import ConfigError
from .models import LintConfiguration

DEFAULT_FILENAMES = {
    "js": "commitlint.config.js",
    "json": ".commitlintrc.json",
}


class ConfigRenderer(ABC):
    """Abstract base class for configuration renderers."""

    name = ""

    @abstractmethod
    def render(self, configuration: LintConfiguration) -> str:
        """Render the configuration as file contents."""
        pass

    def parse(self, text: str) -> LintConfiguration:
        """Read a rendered configuration back."""
        raise ConfigError(f"{self.name} configuration files cannot be parsed")

    @property
    def default_filename(self) -> str:
        return DEFAULT_FILENAMES[self.name]


class JavaScriptRenderer(ConfigRenderer):
    """Renders a ``commitlint.config.js`` CommonJS module."""

    name = "js"

    def render(self, configuration: LintConfiguration) -> str:
        extends = ", ".join(_js_literal(preset) for preset in configuration.extends)
        lines = [
            "const Configuration = {",
            f"    extends: [{extends}],",
            f"    formatter: {_js_literal(configuration.formatter)},",
            "    rules: {",
        ]
        for name, setting in configuration.rules.items():
            values = ", ".join(_js_literal(value) for value in setting.as_list())
            lines.append(f"        {_js_literal(name)}: [{values}],")
        lines.extend(["    },", "};", "", "module.exports = Configuration;", ""])
        return "\n".join(lines)


class JsonRenderer(ConfigRenderer):
    """Renders a ``.commitlintrc.json`` file."""

    name = "json"

    def render(self, configuration: LintConfiguration) -> str:
        return json.dumps(configuration.to_dict(), indent=2) + "\n"

    def parse(self, text: str) -> LintConfiguration:
        try:
            data = json.loads(text, object_pairs_hook=_reject_duplicate_keys)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON configuration: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError("JSON configuration must be an object")
        try:
            return LintConfiguration.from_dict(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid lint configuration: {e}") from e


def _js_literal(value: Union[int, float, str]) -> str:
    # JSON string literals are valid JS and escape every line terminator
    return json.dumps(value)


def _reject_duplicate_keys(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    for key, value in pairs:
        if key in data:
            raise ConfigError(f"Duplicate key '{key}' in JSON configuration")
        data[key] = value
    return data


_RENDERERS = {
    JavaScriptRenderer.name: JavaScriptRenderer,
    JsonRenderer.name: JsonRenderer,
}


def get_renderer(fmt: str) -> ConfigRenderer:
    """Get the renderer for an output format name."""
    try:
        return _RENDERERS[fmt.lower()]()
    except KeyError:
        raise ConfigError(
            f"Unsupported output format '{fmt}' (expected one of: {', '.join(_RENDERERS)})"
        ) from None
