"""Rules for the message footer."""
import re
from typing import Any

from ..models import ParsedCommit, RuleCondition
from .base import EmptyRule, MaxLineLengthRule, Rule, negated

class FooterLeadingBlank(Rule):
    """The raw line before the footer's first line must be blank."""

    name = "footer-leading-blank"

    def check(self, commit: ParsedCommit, condition: RuleCondition, value: Any) -> bool:
        if not commit.footer:
            return True
        raw_lines = re.split(r"\r?\n", commit.raw)
        first_footer_line = re.split(r"\r?\n", commit.footer)[0]
        if first_footer_line not in raw_lines:
            return True
        offset = raw_lines.index(first_footer_line)
        has_blank = offset > 0 and raw_lines[offset - 1] == ""
        return not has_blank if negated(condition) else has_blank

class FooterMaxLineLength(MaxLineLengthRule):
    name = "footer-max-line-length"
    field = "footer"

class FooterEmpty(EmptyRule):
    name = "footer-empty"
    field = "footer"
