"""Base classes for commit message rules.

A rule is a named predicate over a :class:`ParsedCommit`. It receives the
condition (``always`` or ``never``) and the optional value from the rule
set entry and answers whether the commit satisfies it. Rules never build
user-facing text themselves; :meth:`Rule.message_fields` feeds the
localized templates in :mod:`gitcommitlint.messages`.
"""
import re
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from ..models import ParsedCommit, RuleCondition
from .case import CASES, ensure_case

def negated(condition: RuleCondition) -> bool:
    return condition == RuleCondition.NEVER

def format_value(value: Any) -> str:
    """Render a rule value the way it appears inside messages."""
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value)
    return "" if value is None else str(value)

def _as_list(value: Any) -> List[Any]:
    return list(value) if isinstance(value, (list, tuple)) else [value]

class Rule(ABC):
    """Abstract base class for rules."""

    name: str = ""

    def validate_value(self, value: Any) -> Optional[str]:
        """Describe what is wrong with a configured value, or return None if it is usable."""
        return None

    @abstractmethod
    def check(self, commit: ParsedCommit, condition: RuleCondition, value: Any) -> bool:
        """Return True when the commit satisfies the rule."""
        pass

    def message_fields(self, condition: RuleCondition, value: Any) -> Dict[str, Any]:
        """Fields available to this rule's message templates."""
        return {"value": format_value(value)}

class FieldRule(Rule):
    """A rule that looks at a single attribute of the parsed commit."""

    field: str = ""

    def get(self, commit: ParsedCommit) -> Optional[str]:
        return getattr(commit, self.field)

class EmptyRule(FieldRule):
    """``never``: the field must have content. ``always``: it must be empty."""

    def check(self, commit: ParsedCommit, condition: RuleCondition, value: Any) -> bool:
        not_empty = bool(self.get(commit))
        return not_empty if negated(condition) else not not_empty

class EnumRule(FieldRule):
    """The field must (or must not) be one of the configured values."""

    def validate_value(self, value: Any) -> Optional[str]:
        if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
            return f"value must be a list of strings, received {value!r}"
        return None

    def segments(self, text: str) -> Sequence[str]:
        return [text]

    def check(self, commit: ParsedCommit, condition: RuleCondition, value: Any) -> bool:
        text = self.get(commit)
        if not text:
            return True
        allowed = set(value)
        if negated(condition):
            return not any(segment in allowed for segment in self.segments(text))
        return all(segment in allowed for segment in self.segments(text))

class CaseRule(FieldRule):
    """The field must (or must not) be written in one of the configured cases."""

    def validate_value(self, value: Any) -> Optional[str]:
        cases = _as_list(value)
        if not cases or not all(isinstance(case, str) for case in cases):
            return f"value must be a case name or a list of case names, received {value!r}"
        unknown = [case for case in cases if case not in CASES]
        if unknown:
            return f"unknown case {', '.join(unknown)}; supported cases are {', '.join(CASES)}"
        return None

    def segments(self, text: str) -> Sequence[str]:
        return [text]

    def applies_to(self, text: Optional[str]) -> bool:
        return bool(text)

    def check(self, commit: ParsedCommit, condition: RuleCondition, value: Any) -> bool:
        text = self.get(commit)
        if not self.applies_to(text):
            return True
        cases = _as_list(value)
        for segment in self.segments(text):
            matched = any(ensure_case(segment, case) for case in cases)
            if matched == negated(condition):
                return False
        return True

    def message_fields(self, condition: RuleCondition, value: Any) -> Dict[str, Any]:
        return {"value": format_value(value), "cases": format_value(value)}

class _LengthRule(FieldRule):
    def validate_value(self, value: Any) -> Optional[str]:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            return f"value must be a non-negative integer, received {value!r}"
        return None

class MaxLengthRule(_LengthRule):
    def check(self, commit: ParsedCommit, condition: RuleCondition, value: Any) -> bool:
        text = self.get(commit)
        if text is None:
            return True
        return len(text) <= value

class MinLengthRule(_LengthRule):
    def check(self, commit: ParsedCommit, condition: RuleCondition, value: Any) -> bool:
        text = self.get(commit)
        if text is None:
            return True
        return len(text) >= value

class MaxLineLengthRule(_LengthRule):
    def check(self, commit: ParsedCommit, condition: RuleCondition, value: Any) -> bool:
        text = self.get(commit)
        if not text:
            return True
        return all(len(line) <= value for line in re.split(r"\r?\n", text))

class FullStopRule(FieldRule):
    """The field must (or must not) end with the configured character."""

    def validate_value(self, value: Any) -> Optional[str]:
        if not isinstance(value, str) or not value:
            return f"value must be a non-empty string, received {value!r}"
        return None

    def check(self, commit: ParsedCommit, condition: RuleCondition, value: Any) -> bool:
        text = self.get(commit)
        if text is None:
            return True
        has_stop = text.endswith(value)
        return not has_stop if negated(condition) else has_stop
