"""Shared models for gitcommitlint."""
from typing import List, Optional
from dataclasses import dataclass, field
from enum import Enum
from pydantic import BaseModel, Field, model_validator

class RuleLevel(int, Enum):
    DISABLED = 0
    WARNING = 1
    ERROR = 2

class RuleCondition(str, Enum):
    ALWAYS = "always"
    NEVER = "never"

@dataclass(frozen=True)
class Note:
    title: str
    text: str

@dataclass(frozen=True)
class Reference:
    action: Optional[str]
    owner: Optional[str]
    repository: Optional[str]
    issue: str
    raw: str
    prefix: str

@dataclass
class ParsedCommit:
    """A commit message split into its conventional-commit parts.

    Header fields are None when the header does not match the parser's
    header pattern; body and footer are None when empty.
    """
    raw: str
    header: Optional[str] = None
    type: Optional[str] = None
    scope: Optional[str] = None
    subject: Optional[str] = None
    body: Optional[str] = None
    footer: Optional[str] = None
    merge: Optional[str] = None
    notes: List[Note] = field(default_factory=list)
    references: List[Reference] = field(default_factory=list)
    mentions: List[str] = field(default_factory=list)
    revert: Optional[dict] = None

    @property
    def is_empty(self) -> bool:
        return self.header is None and self.body is None and self.footer is None

class RuleResult(BaseModel):
    level: RuleLevel
    message: str
    name: str
    valid: bool

class LintReport(BaseModel):
    valid: bool
    errors: List[RuleResult] = Field(default_factory=list, description="Failed error-level rules in evaluation order")
    warnings: List[RuleResult] = Field(default_factory=list, description="Failed warning-level rules in evaluation order")
    input: str = Field(default="", description="The message that was linted")

    @model_validator(mode="after")
    def _check_validity(self) -> "LintReport":
        if self.valid != (not self.errors):
            raise ValueError("a report is valid exactly when it has no errors")
        return self

    @property
    def problem_count(self) -> int:
        return len(self.errors) + len(self.warnings)
