"""Tests for individual commit message rules."""
import pytest

from gitcommitlint.models import RuleCondition
from gitcommitlint.parsing import parse_commit
from gitcommitlint.rules import RULES

ALWAYS = RuleCondition.ALWAYS
NEVER = RuleCondition.NEVER

def check(name, message, condition=ALWAYS, value=None):
    return RULES[name].check(parse_commit(message), condition, value)

def test_every_rule_is_registered_by_name():
    assert len(RULES) == 19
    for name, rule in RULES.items():
        assert rule.name == name

def test_type_enum():
    allowed = ("feat", "fix")

    assert check("type-enum", "fix: corrige algo", ALWAYS, allowed)
    assert not check("type-enum", "chore: limpa algo", ALWAYS, allowed)

    # Never inverts the membership test
    assert check("type-enum", "chore: limpa algo", NEVER, allowed)
    assert not check("type-enum", "fix: corrige algo", NEVER, allowed)

    # A missing or empty type is left to type-empty
    assert check("type-enum", ": sem tipo", ALWAYS, allowed)
    assert check("type-enum", "sem cabeçalho convencional", ALWAYS, allowed)

def test_type_case():
    assert check("type-case", "fix: algo", ALWAYS, "lower-case")
    assert not check("type-case", "Fix: algo", ALWAYS, "lower-case")
    assert check("type-case", "FIX: algo", ALWAYS, ["lower-case", "upper-case"])
    assert not check("type-case", "fix: algo", NEVER, "lower-case")

def test_type_empty():
    assert check("type-empty", "fix: algo", NEVER)
    assert not check("type-empty", ": algo", NEVER)
    assert not check("type-empty", "fix:", NEVER)
    assert check("type-empty", "algo sem tipo", ALWAYS)

def test_scope_enum_checks_every_scope():
    allowed = ("api", "core")

    assert check("scope-enum", "fix(api): algo", ALWAYS, allowed)
    assert check("scope-enum", "fix(api, core): algo", ALWAYS, allowed)
    assert check("scope-enum", "fix(api/core): algo", ALWAYS, allowed)
    assert not check("scope-enum", "fix(api/ui): algo", ALWAYS, allowed)
    assert not check("scope-enum", "fix(ui/core): algo", NEVER, allowed)
    assert check("scope-enum", "fix: sem escopo", ALWAYS, allowed)

def test_scope_case_and_empty():
    assert check("scope-case", "fix(parser): algo", ALWAYS, "lower-case")
    assert not check("scope-case", "fix(Parser): algo", ALWAYS, "lower-case")
    assert check("scope-case", "fix(my-scope/other-scope): algo", ALWAYS, "kebab-case")
    assert not check("scope-empty", "fix: algo", NEVER)
    assert check("scope-empty", "fix(api): algo", NEVER)

def test_subject_case():
    forbidden = ["sentence-case", "start-case", "pascal-case", "upper-case"]

    assert check("subject-case", "fix: alguma mensagem", NEVER, forbidden)
    assert not check("subject-case", "fix: Alguma mensagem", NEVER, forbidden)
    assert check("subject-case", "fix: alguma mensagem", ALWAYS, "lower-case")
    assert not check("subject-case", "fix: Alguma mensagem", ALWAYS, "lower-case")

def test_subject_case_skips_subjects_not_starting_with_a_letter():
    forbidden = ["sentence-case", "start-case", "pascal-case", "upper-case"]

    assert check("subject-case", "fix: 123 ITENS", NEVER, forbidden)
    assert check("subject-case", "fix: `Config` atualizado", NEVER, forbidden)
    assert check("subject-case", "fix: Ótimo", ALWAYS, "lower-case")

def test_subject_empty_and_full_stop():
    assert not check("subject-empty", "fix:", NEVER)
    assert check("subject-empty", "fix: algo", NEVER)

    assert not check("subject-full-stop", "fix: algo.", NEVER, ".")
    assert check("subject-full-stop", "fix: algo", NEVER, ".")
    assert check("subject-full-stop", "fix: algo.", ALWAYS, ".")

def test_header_length_rules():
    header = "fix: " + "a" * 95

    assert check("header-max-length", header, ALWAYS, 100)
    assert not check("header-max-length", header + "a", ALWAYS, 100)
    assert check("header-min-length", "fix: algo", ALWAYS, 9)
    assert not check("header-min-length", "fix: algo", ALWAYS, 10)

def test_lengths_count_code_points():
    # 100 characters, more than 100 bytes in UTF-8
    header = "fix: " + "é" * 95

    assert check("header-max-length", header, ALWAYS, 100)
    assert check("subject-max-length", header, ALWAYS, 95)
    assert not check("subject-max-length", header, ALWAYS, 94)

def test_header_full_stop():
    assert not check("header-full-stop", "fix: algo.", NEVER, ".")
    assert check("header-full-stop", "fix: algo!", NEVER, ".")

def test_body_leading_blank():
    assert check("body-leading-blank", "fix: algo\n\ncorpo")
    assert not check("body-leading-blank", "fix: algo\ncorpo")
    assert check("body-leading-blank", "fix: algo\ncorpo", NEVER)
    # Nothing to check without a body
    assert check("body-leading-blank", "fix: algo")

def test_body_max_line_length():
    assert check("body-max-line-length", "fix: algo\n\n" + "a" * 10, ALWAYS, 10)
    assert not check("body-max-line-length", "fix: algo\n\ncurto\n" + "a" * 11, ALWAYS, 10)
    assert check("body-max-line-length", "fix: algo", ALWAYS, 10)

def test_body_empty():
    assert not check("body-empty", "fix: algo", NEVER)
    assert check("body-empty", "fix: algo\n\ncorpo", NEVER)
    assert check("body-empty", "fix: algo", ALWAYS)

def test_footer_leading_blank():
    assert check("footer-leading-blank", "fix: algo\n\ncorpo\n\nCloses #12")
    assert not check("footer-leading-blank", "fix: algo\n\ncorpo\nCloses #12")
    assert check("footer-leading-blank", "fix: algo\n\ncorpo\nCloses #12", NEVER)
    assert check("footer-leading-blank", "fix: algo\n\ncorpo")

def test_footer_leading_blank_with_crlf_line_endings():
    assert check("footer-leading-blank", "fix: algo\r\n\r\ncorpo\r\n\r\nBREAKING CHANGE: removido")
    assert not check("footer-leading-blank", "fix: algo\r\n\r\ncorpo\r\nBREAKING CHANGE: removido")

def test_footer_max_line_length_and_empty():
    message = "fix: algo\n\nBREAKING CHANGE: curto\n" + "a" * 30

    assert not check("footer-max-line-length", message, ALWAYS, 20)
    assert check("footer-max-line-length", message, ALWAYS, 30)
    assert check("footer-empty", message, NEVER)
    assert not check("footer-empty", "fix: algo", NEVER)

@pytest.mark.parametrize("name,value", [
    ("header-max-length", "100"),
    ("header-max-length", -1),
    ("header-max-length", True),
    ("type-enum", "feat"),
    ("type-enum", ["feat", 1]),
    ("type-case", "shouting-case"),
    ("subject-case", []),
    ("subject-full-stop", ""),
])
def test_validate_value_rejects_bad_values(name, value):
    assert RULES[name].validate_value(value) is not None

@pytest.mark.parametrize("name,value", [
    ("header-max-length", 0),
    ("type-enum", ["feat", "fix"]),
    ("type-case", "lower-case"),
    ("subject-case", ["sentence-case", "upper-case"]),
    ("subject-full-stop", "."),
    ("body-leading-blank", None),
])
def test_validate_value_accepts_good_values(name, value):
    assert RULES[name].validate_value(value) is None
