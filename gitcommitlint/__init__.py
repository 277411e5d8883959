"""Conventional commit message linting."""

__version__ = "0.1.0"

from .linter import CommitLinter, LintOptions, lint
from .models import LintReport, ParsedCommit, RuleCondition, RuleLevel, RuleResult
from .parsing import CommitParser, ParserOptions, load_parser_preset, parse_commit
from .preset import CONVENTIONAL, commit_lint, get_preset
from .ruleset import RuleConfigError, RuleEntry, RuleSet

__all__ = [
    '__version__',
    'CONVENTIONAL',
    'CommitLinter',
    'CommitParser',
    'LintOptions',
    'LintReport',
    'ParsedCommit',
    'ParserOptions',
    'RuleCondition',
    'RuleConfigError',
    'RuleEntry',
    'RuleLevel',
    'RuleResult',
    'RuleSet',
    'commit_lint',
    'get_preset',
    'lint',
    'load_parser_preset',
    'parse_commit',
]
