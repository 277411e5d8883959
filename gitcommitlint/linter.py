"""Commit message linting."""
import asyncio
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Iterable, List, Optional, Tuple

from .ignores import is_ignored
from .messages import render_message
from .models import LintReport, RuleLevel, RuleResult
from .observers import LintObserver
from .parsing import CommitParser, ParserOptions, conventional_commits_options, load_parser_preset
from .rules import RULES
from .ruleset import RuleSet

@dataclass(frozen=True)
class LintOptions:
    """How messages are parsed and which ones are skipped."""

    parser: ParserOptions = field(default_factory=conventional_commits_options)
    default_ignores: bool = True
    ignores: Tuple[str, ...] = ()
    locale: Optional[str] = None

@lru_cache(maxsize=None)
def _parser_for(options: ParserOptions) -> CommitParser:
    return CommitParser(options)

def lint(message: str, rule_set: RuleSet, options: Optional[LintOptions] = None) -> LintReport:
    """Lint a commit message against a rule set.

    Enabled rules are evaluated in the rule set's declaration order and only
    violations are reported. Invalid messages never raise; they produce a
    report with ``valid`` set to False.

    Args:
        message: Raw commit message
        rule_set: Rules to apply
        options: Parser options, ignore patterns and locale override

    Returns:
        LintReport: The outcome; valid exactly when no error-level rule failed
    """
    options = options or LintOptions()
    if is_ignored(message, defaults=options.default_ignores, ignores=options.ignores):
        return LintReport(valid=True, input=message)

    commit = _parser_for(options.parser).parse(message)
    if commit.is_empty:
        return LintReport(valid=True, input=message)

    locale = options.locale or rule_set.locale
    errors: List[RuleResult] = []
    warnings: List[RuleResult] = []

    for entry in rule_set.enabled_entries():
        rule = RULES[entry.name]
        if rule.check(commit, entry.condition, entry.value):
            continue

        fields = rule.message_fields(entry.condition, entry.value)
        result = RuleResult(
            level=entry.level,
            message=render_message(locale, entry.name, entry.condition, fields),
            name=entry.name,
            valid=False,
        )
        if entry.level == RuleLevel.ERROR:
            errors.append(result)
        else:
            warnings.append(result)

    return LintReport(valid=not errors, errors=errors, warnings=warnings, input=message)

class CommitLinter:
    """Lints messages with a rule set and notifies observers of the outcome.

    The parser preset named by the rule set is resolved on first use and
    reused for every message afterwards.
    """

    def __init__(
        self,
        rule_set: RuleSet,
        default_ignores: bool = True,
        ignores: Iterable[str] = (),
        locale: Optional[str] = None,
        comment_char: Optional[str] = None,
        observers: Optional[List[LintObserver]] = None,
    ):
        self.rule_set = rule_set
        self.default_ignores = default_ignores
        self.ignores = tuple(ignores)
        self.locale = locale
        self.comment_char = comment_char
        self.observers: List[LintObserver] = list(observers or [])
        self._options: Optional[LintOptions] = None

    def add_observer(self, observer: LintObserver) -> None:
        self.observers.append(observer)

    def remove_observer(self, observer: LintObserver) -> None:
        self.observers.remove(observer)

    async def prepare(self) -> LintOptions:
        """Resolve the parser preset and build the lint options."""
        if self._options is None:
            parser = await load_parser_preset(self.rule_set.parser_preset)
            if self.comment_char:
                parser = parser.with_comment_char(self.comment_char)
            self._options = LintOptions(
                parser=parser,
                default_ignores=self.default_ignores,
                ignores=self.ignores,
                locale=self.locale,
            )
        return self._options

    async def lint(self, message: str) -> LintReport:
        options = await self.prepare()
        report = lint(message, self.rule_set, options)
        for observer in self.observers:
            await observer.on_report(report)
        return report

    async def lint_many(self, messages: Iterable[str]) -> List[LintReport]:
        """Lint several messages; reports come back in input order."""
        await self.prepare()
        reports = list(await asyncio.gather(*(self.lint(message) for message in messages)))
        for observer in self.observers:
            await observer.on_summary(reports)
        return reports
