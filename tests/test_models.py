"""Tests for the rule setting and configuration models."""
import pytest
from pydantic import ValidationError

from commitrules.models import (
    DEFAULT_FORMATTER,
    Applicability,
    LintConfiguration,
    RuleSetting,
    Severity,
)


def test_rule_setting_from_list():
    setting = RuleSetting.model_validate([1, "always", 100])
    assert setting.severity is Severity.WARNING
    assert setting.applicability is Applicability.ALWAYS
    assert setting.parameter == 100


def test_rule_setting_without_parameter():
    setting = RuleSetting.model_validate([2, "never"])
    assert setting.parameter is None
    assert setting.as_list() == [2, "never"]


def test_rule_setting_disabled_shorthand():
    setting = RuleSetting.model_validate([0])
    assert setting.severity is Severity.OFF
    assert setting.as_list() == [0, "always"]


def test_rule_setting_single_element_requires_off():
    with pytest.raises(ValidationError, match="applicability"):
        RuleSetting.model_validate([2])


@pytest.mark.parametrize("value", [[3, "always"], [-1, "never"], ["error", "always"]])
def test_rule_setting_rejects_unknown_severity(value):
    with pytest.raises(ValidationError):
        RuleSetting.model_validate(value)


def test_rule_setting_rejects_unknown_applicability():
    with pytest.raises(ValidationError):
        RuleSetting.model_validate([1, "sometimes"])


def test_rule_setting_rejects_too_many_elements():
    with pytest.raises(ValidationError, match="1 to 3 elements"):
        RuleSetting.model_validate([1, "always", 100, "extra"])


def test_rule_setting_keeps_parameter_type():
    assert RuleSetting.model_validate([1, "always", 72]).parameter == 72
    assert RuleSetting.model_validate([1, "always", "72"]).parameter == "72"


def test_rule_setting_is_frozen():
    setting = RuleSetting.model_validate([1, "never"])
    with pytest.raises(ValidationError):
        setting.severity = Severity.ERROR


def test_configuration_defaults():
    configuration = LintConfiguration()
    assert configuration.extends == ()
    assert configuration.formatter == DEFAULT_FORMATTER
    assert configuration.rules == {}


def test_configuration_accepts_single_preset_name():
    configuration = LintConfiguration(extends="@commitlint/config-angular")
    assert configuration.extends == ("@commitlint/config-angular",)


def test_configuration_is_frozen():
    configuration = LintConfiguration()
    with pytest.raises(ValidationError):
        configuration.formatter = "other"


def test_get_rule():
    configuration = LintConfiguration.from_dict({"rules": {"body-empty": [1, "never"]}})
    assert configuration.get_rule("body-empty").applicability is Applicability.NEVER
    assert configuration.get_rule("header-max-length") is None


def test_with_rules_returns_new_record():
    original = LintConfiguration.from_dict(
        {"extends": ["preset"], "rules": {"body-empty": [1, "never"], "body-case": [2, "always", "lower-case"]}}
    )
    updated = original.with_rules(
        {
            "body-empty": RuleSetting.model_validate([0]),
            "header-max-length": RuleSetting.model_validate([2, "always", 72]),
        }
    )

    assert list(updated.rules) == ["body-empty", "body-case", "header-max-length"]
    assert updated.get_rule("body-empty").severity is Severity.OFF
    assert updated.extends == ("preset",)
    # The original record is untouched
    assert original.get_rule("body-empty").severity is Severity.WARNING
    assert "header-max-length" not in original.rules


def test_to_dict_uses_commitlint_shape():
    configuration = LintConfiguration.from_dict(
        {"extends": ["preset"], "formatter": "fmt", "rules": {"signed-off-by": [2, "always", "Signed-off-by:"]}}
    )
    assert configuration.to_dict() == {
        "extends": ["preset"],
        "formatter": "fmt",
        "rules": {"signed-off-by": [2, "always", "Signed-off-by:"]},
    }


def test_rule_setting_float_parameter():
    setting = RuleSetting.model_validate([1, "always", 72.5])
    assert setting.parameter == 72.5
    assert setting.as_list() == [1, "always", 72.5]


def test_rule_setting_integer_parameter_stays_integer():
    parameter = RuleSetting.model_validate([1, "always", 100]).parameter
    assert parameter == 100
    assert isinstance(parameter, int)


@pytest.mark.parametrize("value", [True, False])
def test_rule_setting_rejects_bool_parameter(value):
    with pytest.raises(ValidationError):
        RuleSetting.model_validate([1, "always", value])


def test_configuration_rules_are_read_only():
    configuration = LintConfiguration.from_dict({"rules": {"body-empty": [1, "never"]}})

    with pytest.raises(TypeError):
        configuration.rules["body-empty"] = RuleSetting.model_validate([0])
    with pytest.raises(TypeError):
        del configuration.rules["body-empty"]
    assert configuration.get_rule("body-empty").severity is Severity.WARNING


def test_default_rules_are_read_only():
    with pytest.raises(TypeError):
        LintConfiguration().rules["body-empty"] = RuleSetting.model_validate([0])


def test_rules_are_copied_from_input():
    rules = {"body-empty": RuleSetting.model_validate([1, "never"])}
    configuration = LintConfiguration(rules=rules)

    rules["body-case"] = RuleSetting.model_validate([2, "always", "lower-case"])
    assert "body-case" not in configuration.rules


def test_model_dump_includes_rules():
    configuration = LintConfiguration.from_dict({"rules": {"body-empty": [1, "never"]}})
    dumped = configuration.model_dump()
    assert dumped["rules"]["body-empty"]["severity"] == Severity.WARNING
    assert dumped["rules"]["body-empty"]["parameter"] is None
