"""Conventional commit message parsing.

A raw message is split into a header, body and footer. The header is
matched against the preset's header pattern to extract type, scope and
subject. Every line after the header belongs to the body until the first
note keyword (``BREAKING CHANGE: ...``) or issue reference (``closes #12``)
is seen; from there on lines belong to the footer.

Parser options come from named presets. Presets are resolved through
:func:`load_parser_preset`, which is async so that callers can treat
preset resolution as a one-time initialization step, and memoizes the
result for the lifetime of the process.
"""

import dataclasses
import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from .models import Note, ParsedCommit, Reference

SCISSORS = "# ------------------------ >8 ------------------------"

DEFAULT_REFERENCE_ACTIONS = (
    "close",
    "closes",
    "closed",
    "fix",
    "fixes",
    "fixed",
    "resolve",
    "resolves",
    "resolved",
)


class ParserPresetError(ValueError):
    """Raised when a parser preset name cannot be resolved."""


@dataclass(frozen=True)
class ParserOptions:
    """Patterns and keywords used to decompose a commit message."""

    header_pattern: re.Pattern
    header_correspondence: Tuple[str, ...] = ("type", "scope", "subject")
    breaking_header_pattern: Optional[re.Pattern] = None
    note_keywords: Tuple[str, ...] = ("BREAKING CHANGE", "BREAKING-CHANGE")
    reference_actions: Tuple[str, ...] = DEFAULT_REFERENCE_ACTIONS
    issue_prefixes: Tuple[str, ...] = ("#",)
    revert_pattern: Optional[re.Pattern] = None
    revert_correspondence: Tuple[str, ...] = ("header", "hash")
    merge_pattern: Optional[re.Pattern] = None
    comment_char: Optional[str] = None

    def with_comment_char(self, comment_char: Optional[str]) -> "ParserOptions":
        return dataclasses.replace(self, comment_char=comment_char)


def _append(src: Optional[str], line: str) -> str:
    return f"{src}\n{line}" if src else line


def _trim_newlines(value: str) -> str:
    return value.strip("\r\n")


class CommitParser:
    """Parses raw commit messages according to a set of parser options."""

    def __init__(self, options: ParserOptions):
        self.options = options

        keywords = "|".join(re.escape(keyword) for keyword in options.note_keywords)
        self._notes_re = re.compile(rf"^[\s|*]*({keywords})[:\s]+(.*)", re.IGNORECASE)

        prefixes = "|".join(re.escape(prefix) for prefix in options.issue_prefixes)
        # Matches start only at a token boundary
        self._reference_parts_re = re.compile(
            rf"(?<![\w\-./])([\w\-./]+)?({prefixes})([\w-]*\d+)", re.IGNORECASE | re.ASCII
        )

        self._references_re = None
        if options.reference_actions:
            actions = "|".join(re.escape(action) for action in options.reference_actions)
            self._references_re = re.compile(
                rf"({actions})(?:\s+(.*?))(?=(?:{actions})|$)", re.IGNORECASE
            )

    def _significant_lines(self, raw: str) -> List[str]:
        """Split a message into lines, dropping scissors, comments and gpg output."""
        lines = re.split(r"\r?\n", _trim_newlines(raw))
        if SCISSORS in lines:
            lines = lines[: lines.index(SCISSORS)]

        comment_char = self.options.comment_char
        if comment_char:
            lines = [line for line in lines if not line.startswith(comment_char)]

        return [line for line in lines if not re.match(r"^\s*gpg:", line)]

    def _references(self, line: str) -> List[Reference]:
        lowered = line.lower()
        if not any(prefix.lower() in lowered for prefix in self.options.issue_prefixes):
            return []

        if self._references_re is not None and self._references_re.search(line):
            sentences = [(m.group(1), m.group(2)) for m in self._references_re.finditer(line)]
        else:
            sentences = [(None, line)]

        references = []
        for action, sentence in sentences:
            for match in self._reference_parts_re.finditer(sentence):
                owner = None
                repository = match.group(1) or ""
                if "/" in repository:
                    owner, repository = repository.split("/", 1)
                references.append(
                    Reference(
                        action=action or None,
                        owner=owner,
                        repository=repository or None,
                        issue=match.group(3),
                        raw=match.group(0),
                        prefix=match.group(2),
                    )
                )
        return references

    def parse(self, raw: str) -> ParsedCommit:
        """Parse a raw commit message.

        Args:
            raw: The commit message as typed by the author

        Returns:
            ParsedCommit: The decomposed message. Blank messages, or messages
            holding nothing but comments, come back with every section None.
        """
        commit = ParsedCommit(raw=raw)
        if not raw or not raw.strip():
            return commit

        lines = self._significant_lines(raw)
        if not lines:
            return commit

        header = lines.pop(0)
        merge_match = self.options.merge_pattern.match(header) if self.options.merge_pattern else None
        if merge_match:
            commit.merge = merge_match.group(0)
            header = lines.pop(0) if lines else ""
            while not header.strip() and lines:
                header = lines.pop(0)
        commit.header = header

        header_match = self.options.header_pattern.match(header)
        if header_match:
            parts = dict(zip(self.options.header_correspondence, header_match.groups()))
            commit.type = parts.get("type")
            commit.scope = parts.get("scope")
            commit.subject = parts.get("subject")

        commit.references.extend(self._references(header))

        body: Optional[str] = None
        footer: Optional[str] = None
        notes: List[List[str]] = []
        continue_note = False
        is_body = True

        for line in lines:
            notes_match = self._notes_re.match(line)
            if notes_match:
                continue_note = True
                is_body = False
                footer = _append(footer, line)
                notes.append([notes_match.group(1), notes_match.group(2)])
                continue

            line_references = self._references(line)
            if line_references:
                is_body = False
                continue_note = False
                commit.references.extend(line_references)
                footer = _append(footer, line)
                continue

            if continue_note:
                notes[-1][1] = _append(notes[-1][1], line)
                footer = _append(footer, line)
            elif is_body:
                body = _append(body, line)
            else:
                footer = _append(footer, line)

        if self.options.breaking_header_pattern is not None and not notes:
            breaking = self.options.breaking_header_pattern.match(header)
            if breaking:
                notes.append(["BREAKING CHANGE", breaking.group(breaking.lastindex)])

        commit.notes = [Note(title=title, text=_trim_newlines(text)) for title, text in notes]
        commit.mentions = re.findall(r"@([\w-]+)", raw)

        if self.options.revert_pattern is not None:
            revert_match = self.options.revert_pattern.match(raw)
            if revert_match:
                commit.revert = {
                    name: value or None
                    for name, value in zip(self.options.revert_correspondence, revert_match.groups())
                }

        commit.body = _trim_newlines(body) or None if body else None
        commit.footer = _trim_newlines(footer) or None if footer else None
        return commit


def conventional_commits_options() -> ParserOptions:
    """Options for ``type(scope)!: subject`` headers."""
    return ParserOptions(
        header_pattern=re.compile(r"^(\w*)(?:\((.*)\))?!?: (.*)$", re.ASCII),
        breaking_header_pattern=re.compile(r"^(\w*)(?:\((.*)\))?!: (.*)$", re.ASCII),
        revert_pattern=re.compile(
            r'^(?:Revert|revert:)\s"?([\s\S]+?)"?\s*This reverts commit (\w*)\.', re.IGNORECASE
        ),
    )


def angular_options() -> ParserOptions:
    """Options for ``type(scope): subject`` headers without the ``!`` marker."""
    return ParserOptions(
        header_pattern=re.compile(r"^(\w*)(?:\((.*)\))?: (.*)$", re.ASCII),
        note_keywords=("BREAKING CHANGE",),
        revert_pattern=re.compile(
            r'^(?:Revert|revert:)\s"?([\s\S]+?)"?\s*This reverts commit (\w*)\.', re.IGNORECASE
        ),
    )


PARSER_PRESETS: Dict[str, Callable[[], ParserOptions]] = {
    "conventionalcommits": conventional_commits_options,
    "angular": angular_options,
}

_preset_cache: Dict[str, ParserOptions] = {}


async def load_parser_preset(name: str) -> ParserOptions:
    """Resolve a parser preset by name, once per process.

    Raises:
        ParserPresetError: If no preset is registered under ``name``
    """
    if name not in _preset_cache:
        try:
            factory = PARSER_PRESETS[name]
        except KeyError:
            raise ParserPresetError(
                f"Unknown parser preset '{name}'. "
                f"Available presets: {', '.join(sorted(PARSER_PRESETS))}"
            ) from None
        _preset_cache[name] = factory()
    return _preset_cache[name]


def parse_commit(raw: str, options: Optional[ParserOptions] = None) -> ParsedCommit:
    """Parse a message with the given options (conventional commits by default)."""
    return CommitParser(options or conventional_commits_options()).parse(raw)
