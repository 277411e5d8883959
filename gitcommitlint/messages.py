"""Localized message templates for rule violations.

Templates are keyed by rule name and condition and rendered with
``str.format`` using the fields returned by ``Rule.message_fields``.
A locale that lacks a template falls back to English.
"""
from typing import Any, Dict, Tuple

from .models import RuleCondition

DEFAULT_LOCALE = "en"

ALWAYS = RuleCondition.ALWAYS
NEVER = RuleCondition.NEVER

MessageCatalog = Dict[Tuple[str, RuleCondition], str]

EN: MessageCatalog = {
    ("body-empty", ALWAYS): "body must be empty",
    ("body-empty", NEVER): "body may not be empty",
    ("body-leading-blank", ALWAYS): "body must have leading blank line",
    ("body-leading-blank", NEVER): "body may not have leading blank line",
    ("body-max-line-length", ALWAYS): "body's lines must not be longer than {value} characters",
    ("footer-empty", ALWAYS): "footer must be empty",
    ("footer-empty", NEVER): "footer may not be empty",
    ("footer-leading-blank", ALWAYS): "footer must have leading blank line",
    ("footer-leading-blank", NEVER): "footer may not have leading blank line",
    ("footer-max-line-length", ALWAYS): "footer's lines must not be longer than {value} characters",
    ("header-full-stop", ALWAYS): "header must end with full stop",
    ("header-full-stop", NEVER): "header may not end with full stop",
    ("header-max-length", ALWAYS): "header must not be longer than {value} characters",
    ("header-min-length", ALWAYS): "header must not be shorter than {value} characters",
    ("scope-case", ALWAYS): "scope must be {cases}",
    ("scope-case", NEVER): "scope must not be {cases}",
    ("scope-empty", ALWAYS): "scope must be empty",
    ("scope-empty", NEVER): "scope may not be empty",
    ("scope-enum", ALWAYS): "scope must be one of [{value}]",
    ("scope-enum", NEVER): "scope must not be one of [{value}]",
    ("subject-case", ALWAYS): "subject must be {cases}",
    ("subject-case", NEVER): "subject must not be {cases}",
    ("subject-empty", ALWAYS): "subject must be empty",
    ("subject-empty", NEVER): "subject may not be empty",
    ("subject-full-stop", ALWAYS): "subject must end with full stop",
    ("subject-full-stop", NEVER): "subject may not end with full stop",
    ("subject-max-length", ALWAYS): "subject must not be longer than {value} characters",
    ("type-case", ALWAYS): "type must be {cases}",
    ("type-case", NEVER): "type must not be {cases}",
    ("type-empty", ALWAYS): "type must be empty",
    ("type-empty", NEVER): "type may not be empty",
    ("type-enum", ALWAYS): "type must be one of [{value}]",
    ("type-enum", NEVER): "type must not be one of [{value}]",
}

PT_BR: MessageCatalog = {
    ("body-leading-blank", ALWAYS): "corpo da mensagem deve ter uma linha em branco antes",
    ("body-max-line-length", ALWAYS): "linhas do corpo da mensagem não podem ter mais de {value} caracteres",
    ("footer-leading-blank", ALWAYS): "cabeçalho deve ter uma linha em branco antes",
    ("footer-max-line-length", ALWAYS): "linhas do rodapé não podem ter mais de {value} caracteres",
    ("header-max-length", ALWAYS): "cabeçalho não pode ter mais de {value} caracteres",
    ("subject-case", NEVER): "descrição não pode ser {cases}",
    ("subject-empty", NEVER): "descrição não pode ser vazia",
    ("type-case", ALWAYS): "tipo deve ser {cases}",
    ("type-empty", NEVER): "tipo não pode ser vazio",
    ("type-enum", ALWAYS): "tipo deve ser um dos [{value}]",
}

CATALOGS: Dict[str, MessageCatalog] = {
    "en": EN,
    "pt-BR": PT_BR,
}

def render_message(locale: str, name: str, condition: RuleCondition, fields: Dict[str, Any]) -> str:
    """Render the violation message for a rule in the requested locale."""
    key = (name, RuleCondition(condition))
    template = CATALOGS.get(locale, {}).get(key) or EN.get(key)
    if template is None:
        return f"{name} ({key[1].value}) failed"
    return template.format(**fields)
