"""Tests for case transforms."""
import pytest

from gitcommitlint.rules.case import CASES, deburr, ensure_case, to_case, words

def test_words_split_on_humps_and_punctuation():
    assert words("fooBar") == ["foo", "Bar"]
    assert words("XMLHttpRequest") == ["XML", "Http", "Request"]
    assert words("foo_bar-baz qux") == ["foo", "bar", "baz", "qux"]
    assert words("version 2 release") == ["version", "2", "release"]

def test_deburr():
    assert deburr("Ação Rápida") == "Acao Rapida"
    assert deburr("straße") == "strasse"
    assert deburr("plain") == "plain"

@pytest.mark.parametrize("target,expected", [
    ("lower-case", "foo bar"),
    ("upper-case", "FOO BAR"),
    ("sentence-case", "Foo bar"),
    ("start-case", "Foo Bar"),
    ("pascal-case", "FooBar"),
    ("camel-case", "fooBar"),
    ("kebab-case", "foo-bar"),
    ("snake-case", "foo_bar"),
])
def test_to_case(target, expected):
    assert to_case("foo bar", target) == expected

def test_case_aliases():
    assert to_case("Foo", "lowercase") == "foo"
    assert to_case("foo", "uppercase") == "FOO"
    assert to_case("foo bar", "sentencecase") == "Foo bar"

def test_to_case_rejects_unknown_case():
    with pytest.raises(ValueError, match="Unknown target case"):
        to_case("foo", "shouting-case")

def test_ensure_case():
    assert ensure_case("alguma mensagem", "lower-case")
    assert not ensure_case("Alguma mensagem", "lower-case")
    assert ensure_case("Alguma mensagem", "sentence-case")
    assert ensure_case("Alguma Mensagem", "start-case")
    assert ensure_case("AlgumaMensagem", "pascal-case")
    assert ensure_case("ALGUMAMENSAGEM", "upper-case")
    assert not ensure_case("alguma Mensagem", "start-case")

def test_ensure_case_word_cases_compare_deburred_text():
    # The start-case form of "Ação Rápida" is "Acao Rapida"
    assert not ensure_case("Ação Rápida", "start-case")
    assert ensure_case("Acao Rapida", "start-case")

def test_ensure_case_ignores_quoted_fragments():
    assert ensure_case("atualiza `Config` e 'README'", "lower-case")
    assert ensure_case('usa "Rich" no console', "lower-case")
    assert not ensure_case("atualiza Config", "lower-case")

def test_ensure_case_treats_empty_transform_as_match():
    assert ensure_case("", "upper-case")
    assert ensure_case("`Tudo`", "lower-case")
    assert ensure_case("!!!", "start-case")

def test_every_case_is_idempotent():
    for name in CASES:
        once = to_case("alguma Mensagem de teste", name)
        assert to_case(once, name) == once
