"""The lint configuration shipped with this repository."""
from .models import DEFAULT_FORMATTER, LintConfiguration, RuleSetting

CONVENTIONAL_PRESET = "@commitlint/config-conventional"

CONFIGURATION = LintConfiguration(
    extends=(CONVENTIONAL_PRESET,),
    formatter=DEFAULT_FORMATTER,
    rules={
        "body-empty": RuleSetting.model_validate([1, "never"]),
        "body-case": RuleSetting.model_validate([2, "always", "sentence-case"]),
        "body-max-line-length": RuleSetting.model_validate([1, "always", 100]),
        "references-empty": RuleSetting.model_validate([1, "never"]),
        "signed-off-by": RuleSetting.model_validate([2, "always", "Signed-off-by:"]),
    },
)
