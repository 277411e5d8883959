"""Case transforms used by the ``*-case`` rules.

Word-based cases (start, pascal, camel, kebab, snake) split text on
punctuation and on case humps (``fooBar``, ``XMLHttp``) after stripping
diacritics, so ``"Ação Rápida"`` is *not* start-case: its start-case form
is ``"Acao Rapida"``.
"""

import re
import unicodedata
from typing import Callable, Dict, List

_UPPER = "A-ZÀ-ÖØ-Þ"
_LOWER = "a-zß-öø-ÿ"

_WORD_RE = re.compile(
    rf"[{_UPPER}]+(?=[{_UPPER}][{_LOWER}])"
    rf"|[{_UPPER}]?[{_LOWER}]+"
    rf"|[{_UPPER}]+"
    r"|\d+"
    r"|[^\W\d_]+"
)

_QUOTED_RE = re.compile(r"`.*?`|\".*?\"|'.*?'")

# Letters without a canonical decomposition
_UNDECOMPOSABLE = str.maketrans(
    {
        "Æ": "Ae",
        "æ": "ae",
        "Ø": "O",
        "ø": "o",
        "ß": "ss",
        "Đ": "D",
        "đ": "d",
        "Ð": "D",
        "ð": "d",
        "Þ": "Th",
        "þ": "th",
        "Ł": "L",
        "ł": "l",
        "Œ": "Oe",
        "œ": "oe",
    }
)


def deburr(value: str) -> str:
    """Strip diacritics, mapping latin letters to their basic form."""
    decomposed = unicodedata.normalize("NFD", value)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.translate(_UNDECOMPOSABLE)


def words(value: str) -> List[str]:
    return _WORD_RE.findall(deburr(value).replace("'", "").replace("’", ""))


def upper_first(value: str) -> str:
    return value[:1].upper() + value[1:]


def camel_case(value: str) -> str:
    return "".join(
        word.lower() if index == 0 else upper_first(word.lower())
        for index, word in enumerate(words(value))
    )


def pascal_case(value: str) -> str:
    return upper_first(camel_case(value))


def start_case(value: str) -> str:
    return " ".join(upper_first(word) for word in words(value))


def kebab_case(value: str) -> str:
    return "-".join(word.lower() for word in words(value))


def snake_case(value: str) -> str:
    return "_".join(word.lower() for word in words(value))


CASES: Dict[str, Callable[[str], str]] = {
    "camel-case": camel_case,
    "kebab-case": kebab_case,
    "snake-case": snake_case,
    "pascal-case": pascal_case,
    "start-case": start_case,
    "upper-case": str.upper,
    "uppercase": str.upper,
    "sentence-case": upper_first,
    "sentencecase": upper_first,
    "lower-case": str.lower,
    "lowercase": str.lower,
}


def to_case(value: str, target: str) -> str:
    try:
        transform = CASES[target]
    except KeyError:
        raise ValueError(f"Unknown target case '{target}'") from None
    return transform(value)


def ensure_case(raw: str, target: str) -> bool:
    """Check whether ``raw`` is already written in the ``target`` case.

    Quoted and back-ticked fragments are ignored since they usually hold
    proper names. Text that transforms to nothing counts as a match.
    """
    value = _QUOTED_RE.sub("", raw or "").strip()
    transformed = to_case(value, target)
    if transformed == "":
        return True
    return transformed == value
