"""Commit message rules package."""

from typing import Dict

from .base import Rule
from .body import BodyEmpty, BodyLeadingBlank, BodyMaxLineLength
from .case import ensure_case, to_case
from .footer import FooterEmpty, FooterLeadingBlank, FooterMaxLineLength
from .header import (
    HeaderFullStop,
    HeaderMaxLength,
    HeaderMinLength,
    ScopeCase,
    ScopeEmpty,
    ScopeEnum,
    SubjectCase,
    SubjectEmpty,
    SubjectFullStop,
    SubjectMaxLength,
    TypeCase,
    TypeEmpty,
    TypeEnum,
)

RULES: Dict[str, Rule] = {
    rule.name: rule
    for rule in (
        BodyEmpty(),
        BodyLeadingBlank(),
        BodyMaxLineLength(),
        FooterEmpty(),
        FooterLeadingBlank(),
        FooterMaxLineLength(),
        HeaderFullStop(),
        HeaderMaxLength(),
        HeaderMinLength(),
        ScopeCase(),
        ScopeEmpty(),
        ScopeEnum(),
        SubjectCase(),
        SubjectEmpty(),
        SubjectFullStop(),
        SubjectMaxLength(),
        TypeCase(),
        TypeEmpty(),
        TypeEnum(),
    )
}

__all__ = [
    'RULES',
    'Rule',
    'ensure_case',
    'to_case',
]
