"""Rules for the header line and the type, scope and subject parsed from it."""
import re
from typing import Optional, Sequence

from .base import CaseRule, EmptyRule, EnumRule, FullStopRule, MaxLengthRule, MinLengthRule

_SCOPE_DELIMITERS = re.compile(r"/|\\|, ?")

class HeaderMaxLength(MaxLengthRule):
    name = "header-max-length"
    field = "header"

class HeaderMinLength(MinLengthRule):
    name = "header-min-length"
    field = "header"

class HeaderFullStop(FullStopRule):
    name = "header-full-stop"
    field = "header"

class TypeEnum(EnumRule):
    name = "type-enum"
    field = "type"

class TypeCase(CaseRule):
    name = "type-case"
    field = "type"

class TypeEmpty(EmptyRule):
    name = "type-empty"
    field = "type"

class ScopeEnum(EnumRule):
    """Multiple scopes may be given as ``a/b``, ``a\\b`` or ``a, b``; each is checked."""

    name = "scope-enum"
    field = "scope"

    def segments(self, text: str) -> Sequence[str]:
        return _SCOPE_DELIMITERS.split(text)

class ScopeCase(CaseRule):
    name = "scope-case"
    field = "scope"

    def segments(self, text: str) -> Sequence[str]:
        return _SCOPE_DELIMITERS.split(text)

class ScopeEmpty(EmptyRule):
    name = "scope-empty"
    field = "scope"

class SubjectCase(CaseRule):
    name = "subject-case"
    field = "subject"

    def applies_to(self, text: Optional[str]) -> bool:
        # Subjects opening with a digit, symbol or non-ascii letter are not case-checked
        return isinstance(text, str) and re.match(r"[a-z]", text, re.IGNORECASE) is not None

class SubjectEmpty(EmptyRule):
    name = "subject-empty"
    field = "subject"

class SubjectFullStop(FullStopRule):
    name = "subject-full-stop"
    field = "subject"

class SubjectMaxLength(MaxLengthRule):
    name = "subject-max-length"
    field = "subject"
