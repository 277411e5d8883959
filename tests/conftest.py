import pytest
import tempfile
from pathlib import Path
from git import Repo

pytest_plugins = ('pytest_asyncio',)

@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep GIT_COMMIT_LINT_* settings from the developer's shell out of the tests."""
    for name in [
        "GIT_COMMIT_LINT_PRESET",
        "GIT_COMMIT_LINT_PARSER_PRESET",
        "GIT_COMMIT_LINT_LOCALE",
        "GIT_COMMIT_LINT_DEFAULT_IGNORES",
        "GIT_COMMIT_LINT_HELP_URL",
        "GIT_COMMIT_LINT_ALWAYS_LOG",
        "GIT_COMMIT_LINT_LOG_FILE",
        "GIT_COMMIT_LINT_LOG_DIRECTORY",
    ]:
        monkeypatch.delenv(name, raising=False)
    yield

@pytest.fixture
def temp_git_repo():
    """Create a temporary git repository with a non-conventional first commit."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        repo = Repo.init(tmp_dir)

        test_file = Path(tmp_dir) / "test.txt"
        test_file.write_text("Initial content")

        repo.index.add(["test.txt"])
        repo.index.commit("Initial commit")

        yield tmp_dir

@pytest.fixture
def temp_git_repo_with_history(temp_git_repo):
    """Add conventional commits on top of the initial commit.

    The repository's commits, oldest first:
    1. "Initial commit" (no type)
    2. "feat: adiciona arquivo de notas"
    3. "fix(notas): corrige codificação\\n\\ncorpo explicando a correção"
    """
    repo = Repo(temp_git_repo)
    notes = Path(temp_git_repo) / "notes.txt"

    notes.write_text("notas")
    repo.index.add(["notes.txt"])
    repo.index.commit("feat: adiciona arquivo de notas")

    notes.write_text("notas corrigidas")
    repo.index.add(["notes.txt"])
    repo.index.commit("fix(notas): corrige codificação\n\ncorpo explicando a correção")

    yield temp_git_repo
