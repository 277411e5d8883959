"""Commit messages that are skipped instead of linted."""
import re
from typing import Iterable

from packaging.version import InvalidVersion, Version

DEFAULT_IGNORES = (
    re.compile(r"^((Merge pull request)|(Merge (.*?) into (.*?)|(Merge branch (.*?)))(?:\r?\n)*$)", re.MULTILINE),
    re.compile(r"^(Merge tag (.*?))(?:\r?\n)*$", re.MULTILINE),
    re.compile(r"^(R|r)evert (.*)"),
    re.compile(r"^(R|r)eapply (.*)"),
    re.compile(r"^(amend|fixup|squash)!"),
    re.compile(r"^(Merged (.*?)(in|into) (.*)|Merged PR (.*): (.*))"),
    re.compile(r"^Merge remote-tracking branch(\s*)(.*)"),
    re.compile(r"^Automatic merge(.*)"),
    re.compile(r"^Auto-merged (.*?) into (.*)"),
)

def is_release(message: str) -> bool:
    """Check for release commits whose header is only a version, e.g. ``chore(release): 1.2.0``."""
    first_line = message.split("\n", 1)[0]
    candidate = re.sub(r"^chore(\([^)]+\))?:", "", first_line).strip()
    try:
        version = Version(candidate)
    except InvalidVersion:
        return False
    return len(version.release) == 3

def is_ignored(message: str, defaults: bool = True, ignores: Iterable[str] = ()) -> bool:
    """Check whether a message should be skipped.

    Args:
        message: Raw commit message
        defaults: Whether the built-in merge, revert, fixup and release patterns apply
        ignores: Additional regular expressions; a search match ignores the message
    """
    if defaults and (any(pattern.search(message) for pattern in DEFAULT_IGNORES) or is_release(message)):
        return True
    return any(re.search(pattern, message) for pattern in ignores)
