"""Shared fixtures: throwaway repositories with controlled commit dates."""

import tempfile
from pathlib import Path
from typing import Iterable, Optional, Sequence, Tuple

import pytest
from git import Commit, Repo


class HistoryBuilder:
    """Creates commits with explicit timestamps without touching a worktree."""

    def __init__(self, repo: Repo):
        self.repo = repo
        self.tree = repo.index.write_tree()

    def commit(
        self, message: str, timestamp: int, parents: Iterable[Commit] = ()
    ) -> Commit:
        date = f"{timestamp} +0000"
        return Commit.create_from_tree(
            self.repo,
            self.tree,
            message,
            parent_commits=list(parents),
            head=False,
            author_date=date,
            commit_date=date,
        )

    def chain(
        self, entries: Sequence[Tuple[str, int]], parent: Optional[Commit] = None
    ) -> Commit:
        """Commit ``(message, timestamp)`` pairs one after another; return the tip."""
        tip = parent
        for message, timestamp in entries:
            tip = self.commit(message, timestamp, [tip] if tip is not None else [])
        return tip

    def branch(self, name: str, commit: Commit) -> None:
        self.repo.create_head(name, commit)


@pytest.fixture
def temp_git_project():
    """Create an empty git repository for testing."""
    with tempfile.TemporaryDirectory() as temp_dir:
        project_path = Path(temp_dir)
        repo = Repo.init(project_path)

        # Configure git user for testing
        with repo.config_writer() as config:
            config.set_value("user", "name", "Test User")
            config.set_value("user", "email", "test@example.com")

        repo.close()
        yield project_path


@pytest.fixture
def repo(temp_git_project):
    repo = Repo(temp_git_project)
    yield repo
    repo.close()


@pytest.fixture
def history(repo):
    return HistoryBuilder(repo)
