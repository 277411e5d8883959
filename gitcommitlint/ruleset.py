"""Rule sets: ordered, validated rule configuration.

A rule set is built from a mapping of rule name to ``[level, condition, value]``
in the same shape commitlint configurations use::

    {
        "type-empty": [2, "never"],
        "header-max-length": [2, "always", 100],
        "body-leading-blank": [0],
    }

Mapping order is preserved and decides the order in which rules are
evaluated and problems are reported.
"""
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .models import RuleCondition, RuleLevel
from .rules import RULES

class RuleConfigError(ValueError):
    """Raised when a rule configuration entry is malformed."""

class RuleEntry(BaseModel):
    """A single configured rule."""

    model_config = ConfigDict(frozen=True)

    name: str
    level: RuleLevel
    condition: RuleCondition = RuleCondition.ALWAYS
    value: Any = None

    @property
    def enabled(self) -> bool:
        return self.level != RuleLevel.DISABLED

    def to_config(self) -> List[Any]:
        if not self.enabled and self.value is None:
            return [self.level.value]
        config: List[Any] = [self.level.value, self.condition.value]
        if self.value is not None:
            config.append(list(self.value) if isinstance(self.value, tuple) else self.value)
        return config

def _freeze(value: Any) -> Any:
    return tuple(value) if isinstance(value, list) else value

def _parse_entry(name: str, config: Any) -> RuleEntry:
    if not isinstance(config, (list, tuple)):
        raise RuleConfigError(f"config for rule {name} must be a list, received {config!r}")
    if not config:
        raise RuleConfigError(f"config for rule {name} must not be empty")

    level = config[0]
    if isinstance(level, bool) or not isinstance(level, int):
        raise RuleConfigError(f"level for rule {name} must be a number, received {level!r}")
    if level not in (0, 1, 2):
        raise RuleConfigError(f"level for rule {name} must be between 0 and 2, received {level!r}")
    if level == RuleLevel.DISABLED and len(config) == 1:
        return RuleEntry(name=name, level=RuleLevel.DISABLED)
    if len(config) not in (2, 3):
        raise RuleConfigError(
            f"config for rule {name} must be 2 or 3 items long, received {list(config)!r}"
        )

    condition = config[1]
    if condition not in ("always", "never"):
        raise RuleConfigError(
            f'condition for rule {name} must be "always" or "never", received {condition!r}'
        )

    value = config[2] if len(config) == 3 else None
    problem = RULES[name].validate_value(value)
    if problem:
        raise RuleConfigError(f"value for rule {name} is invalid: {problem}")

    return RuleEntry(name=name, level=RuleLevel(level), condition=RuleCondition(condition), value=_freeze(value))

def parse_entries(mapping: Mapping[str, Any]) -> Tuple[RuleEntry, ...]:
    """Validate a rule mapping, reporting every malformed entry at once.

    Raises:
        RuleConfigError: If any rule name is unknown or any entry is malformed
    """
    unknown = [name for name in mapping if name not in RULES]
    if unknown:
        raise RuleConfigError(
            f"Found invalid rule names: {', '.join(unknown)}. "
            f"Supported rule names are: {', '.join(RULES)}"
        )

    entries = []
    problems = []
    for name, config in mapping.items():
        try:
            entries.append(_parse_entry(name, config))
        except RuleConfigError as e:
            problems.append(str(e))
    if problems:
        raise RuleConfigError("\n".join(problems))
    return tuple(entries)

class RuleSet(BaseModel):
    """An immutable, ordered collection of rule entries.

    Attributes:
        entries: Rule entries in evaluation order
        parser_preset: Name of the parser preset used to decompose messages
        locale: Locale used to render violation messages
    """

    model_config = ConfigDict(frozen=True)

    entries: Tuple[RuleEntry, ...] = ()
    parser_preset: str = Field(default="conventionalcommits", description="Name of the parser preset")
    locale: str = Field(default="en", description="Locale for violation messages")

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, Any],
        parser_preset: str = "conventionalcommits",
        locale: str = "en",
    ) -> "RuleSet":
        return cls(entries=parse_entries(mapping), parser_preset=parser_preset, locale=locale)

    def merged(
        self,
        overrides: Mapping[str, Any],
        parser_preset: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> "RuleSet":
        """Return a copy with ``overrides`` applied.

        Overridden rules keep their position; new rules are appended.
        """
        replacements = {entry.name: entry for entry in parse_entries(overrides)}
        entries = [replacements.pop(entry.name, entry) for entry in self.entries]
        entries.extend(replacements.values())
        return RuleSet(
            entries=tuple(entries),
            parser_preset=parser_preset or self.parser_preset,
            locale=locale or self.locale,
        )

    def enabled_entries(self) -> Iterator[RuleEntry]:
        return (entry for entry in self.entries if entry.enabled)

    def get(self, name: str) -> Optional[RuleEntry]:
        return next((entry for entry in self.entries if entry.name == name), None)

    @property
    def names(self) -> List[str]:
        return [entry.name for entry in self.entries]

    def to_mapping(self) -> Dict[str, List[Any]]:
        return {entry.name: entry.to_config() for entry in self.entries}
