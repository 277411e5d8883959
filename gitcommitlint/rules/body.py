"""Rules for the message body."""
import re
from typing import Any

from ..models import ParsedCommit, RuleCondition
from .base import EmptyRule, MaxLineLengthRule, Rule, negated

class BodyLeadingBlank(Rule):
    """The line right after the header must be blank when a body exists."""

    name = "body-leading-blank"

    def check(self, commit: ParsedCommit, condition: RuleCondition, value: Any) -> bool:
        if not commit.body:
            return True
        second_line = re.split(r"\r?\n", commit.raw)[1:2]
        has_blank = not any(second_line)
        return not has_blank if negated(condition) else has_blank

class BodyMaxLineLength(MaxLineLengthRule):
    name = "body-max-line-length"
    field = "body"

class BodyEmpty(EmptyRule):
    name = "body-empty"
    field = "body"
