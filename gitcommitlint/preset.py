"""Shipped rule presets.

The ``conventional`` preset enforces conventional commits with messages in
Brazilian Portuguese::

    report = await commit_lint("FIX: alguma mensagem")
    [error.name for error in report.errors]  # ['type-case', 'type-enum']
"""
from typing import Dict

from .linter import LintOptions, lint
from .models import LintReport
from .parsing import load_parser_preset
from .ruleset import RuleSet

CONVENTIONAL_RULES = {
    "body-leading-blank": [1, "always"],
    "body-max-line-length": [2, "always", 100],
    "footer-leading-blank": [1, "always"],
    "footer-max-line-length": [2, "always", 100],
    "header-max-length": [2, "always", 100],
    "subject-case": [2, "never", ["sentence-case", "start-case", "pascal-case", "upper-case"]],
    "subject-empty": [2, "never"],
    "subject-full-stop": [2, "never", "."],
    "type-case": [2, "always", "lower-case"],
    "type-empty": [2, "never"],
    "type-enum": [2, "always", ["docs", "feat", "fix", "perf", "refactor", "style"]],
}

CONVENTIONAL = RuleSet.from_mapping(
    CONVENTIONAL_RULES,
    parser_preset="conventionalcommits",
    locale="pt-BR",
)

PRESETS: Dict[str, RuleSet] = {
    "conventional": CONVENTIONAL,
}

class UnknownPresetError(ValueError):
    """Raised when a rule preset name is not registered."""

def get_preset(name: str) -> RuleSet:
    try:
        return PRESETS[name]
    except KeyError:
        raise UnknownPresetError(
            f"Unknown preset '{name}'. Available presets: {', '.join(sorted(PRESETS))}"
        ) from None

async def commit_lint(message: str, rule_set: RuleSet = CONVENTIONAL) -> LintReport:
    """Lint a message with a rule set, resolving its parser preset first."""
    parser = await load_parser_preset(rule_set.parser_preset)
    return lint(message, rule_set, LintOptions(parser=parser))
