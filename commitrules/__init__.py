"""Commit-message lint configuration for commitlint."""

__version__ = "0.1.0"

from .defaults import CONFIGURATION
from .models import Applicability, LintConfiguration, RuleSetting, Severity

__all__ = [
    "CONFIGURATION",
    "Applicability",
    "LintConfiguration",
    "RuleSetting",
    "Severity",
    "__version__",
]
