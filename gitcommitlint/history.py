"""Reading commit messages from a git repository."""

from pathlib import Path
from typing import List, Optional

from git import Repo

DEFAULT_COMMENT_CHAR = "#"


def open_repo(path: Path) -> Repo:
    """Open the repository containing ``path``.

    Raises:
        git.exc.InvalidGitRepositoryError: If ``path`` is not inside a repository
        git.exc.NoSuchPathError: If ``path`` does not exist
    """
    return Repo(path, search_parent_directories=True)


def read_commit_messages(
    repo: Repo,
    from_ref: Optional[str] = None,
    to_ref: str = "HEAD",
    last: bool = False,
) -> List[str]:
    """Read commit messages in ``git log`` order (newest first).

    Args:
        repo: The git repository to read from
        from_ref: Exclusive lower bound of the range; all history when None
        to_ref: Inclusive upper bound of the range
        last: Read only the commit at ``to_ref``
    """
    if last:
        return [repo.commit(to_ref).message]
    rev = f"{from_ref}..{to_ref}" if from_ref else to_ref
    return [commit.message for commit in repo.iter_commits(rev)]


def edit_message_path(repo: Optional[Repo], edit: str) -> Path:
    """Resolve the message file for ``--edit``; empty means the repository's COMMIT_EDITMSG."""
    if edit:
        return Path(edit)
    if repo is None:
        raise ValueError("--edit without a file requires a git repository")
    return Path(repo.git_dir) / "COMMIT_EDITMSG"


def read_message_file(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def get_comment_char(repo: Optional[Repo]) -> str:
    """The comment character git strips from commit messages (``core.commentChar``)."""
    if repo is None:
        return DEFAULT_COMMENT_CHAR
    with repo.config_reader() as reader:
        value = reader.get_value("core", "commentChar", DEFAULT_COMMENT_CHAR)
    value = str(value)
    if not value or value == "auto":
        return DEFAULT_COMMENT_CHAR
    return value[0]
