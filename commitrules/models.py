"""Shared models for commitrules."""
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_serializer,
    field_validator,
    model_validator,
)

DEFAULT_FORMATTER = "@commitlint/format"


class Severity(IntEnum):
    """How a rule violation is reported."""

    OFF = 0
    WARNING = 1
    ERROR = 2


class Applicability(str, Enum):
    """Whether the rule condition must or must not hold."""

    ALWAYS = "always"
    NEVER = "never"


class RuleSetting(BaseModel):
    """A single rule entry: severity, applicability and an optional parameter.

    Accepts the list form commitlint uses, e.g. ``[1, "always", 100]``.
    """

    model_config = ConfigDict(frozen=True)

    severity: Severity
    applicability: Applicability = Applicability.ALWAYS
    parameter: Optional[Union[StrictInt, StrictFloat, StrictStr]] = None

    @model_validator(mode="before")
    @classmethod
    def _from_sequence(cls, data: Any) -> Any:
        if not isinstance(data, (list, tuple)):
            return data
        if len(data) == 1:
            # Only a disabled rule may leave out the applicability
            if data[0] != Severity.OFF:
                raise ValueError("rule setting needs a severity and an applicability")
            return {"severity": data[0]}
        if not 2 <= len(data) <= 3:
            raise ValueError(
                f"rule setting must have 1 to 3 elements, got {len(data)}"
            )
        return dict(zip(("severity", "applicability", "parameter"), data))

    def as_list(self) -> List[Union[int, float, str]]:
        values: List[Union[int, float, str]] = [int(self.severity), self.applicability.value]
        if self.parameter is not None:
            values.append(self.parameter)
        return values


class LintConfiguration(BaseModel):
    """The configuration record handed to the commit-lint engine."""

    model_config = ConfigDict(frozen=True)

    extends: Tuple[str, ...] = Field(
        default=(), description="Preset identifiers to inherit rules from, in order"
    )
    formatter: str = Field(
        default=DEFAULT_FORMATTER,
        description="Identifier of the formatter that renders rule violations",
    )
    rules: Dict[str, RuleSetting] = Field(
        default_factory=dict,
        validate_default=True,
        description="Rule overrides keyed by rule name",
    )

    @field_validator("extends", mode="before")
    @classmethod
    def _single_preset(cls, value: Any) -> Any:
        # commitlint also accepts a bare preset name
        if isinstance(value, str):
            return (value,)
        return value

    @field_validator("rules")
    @classmethod
    def _read_only_rules(cls, value: Dict[str, RuleSetting]) -> Mapping[str, RuleSetting]:
        return MappingProxyType(dict(value))

    @field_serializer("rules")
    def _dump_rules(self, rules: Mapping[str, RuleSetting]) -> Dict[str, Any]:
        return {name: setting.model_dump() for name, setting in rules.items()}

    def get_rule(self, name: str) -> Optional[RuleSetting]:
        """Return the setting for rule ``name``, or None if it is not configured."""
        return self.rules.get(name)

    def with_rules(self, overrides: Mapping[str, RuleSetting]) -> "LintConfiguration":
        """Return a copy with ``overrides`` applied on top of the current rules."""
        rules = dict(self.rules)
        rules.update(overrides)
        return LintConfiguration(extends=self.extends, formatter=self.formatter, rules=rules)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the object shape commitlint reads."""
        return {
            "extends": list(self.extends),
            "formatter": self.formatter,
            "rules": {name: setting.as_list() for name, setting in self.rules.items()},
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LintConfiguration":
        """Build a record from the commitlint object shape."""
        return cls.model_validate(dict(data))
