"""Repository access: opening by path and resolving branch tips."""

import contextlib
import logging
from pathlib import Path
from typing import Iterator, Union

import git
from git import Repo

from backport_pending.errors import (
    BranchNotFoundError,
    RepositoryAccessError,
    RepositoryNotFoundError,
)

logger = logging.getLogger(__name__)


def open_repository(path: Union[str, Path]) -> Repo:
    """Open the git repository at ``path``."""
    repo_path = Path(path)
    try:
        repo = Repo(repo_path)
    except (git.exc.NoSuchPathError, git.exc.InvalidGitRepositoryError) as e:
        raise RepositoryNotFoundError(f"No git repository found at {repo_path}") from e
    except (git.exc.GitError, OSError) as e:
        raise RepositoryAccessError(f"Cannot open repository at {repo_path}: {e}") from e

    logger.debug("Opened repository %s", repo.git_dir)
    return repo


@contextlib.contextmanager
def repository(path: Union[str, Path]) -> Iterator[Repo]:
    """Open a repository for the duration of a ``with`` block."""
    repo = open_repository(path)
    try:
        yield repo
    finally:
        repo.close()


def resolve_branch(repo: Repo, name: str) -> str:
    """Return the hexsha at the tip of branch ``name``.

    Local branches win; otherwise any reference with that short name
    (``origin/release``, a tag) is accepted.
    """
    for refs in (repo.heads, repo.references):
        try:
            ref = refs[name]
        except IndexError:
            continue

        try:
            tip = ref.commit.hexsha
        except (git.exc.GitError, git.exc.ODBError, ValueError) as e:
            raise RepositoryAccessError(f"Cannot load tip of {name!r}: {e}") from e
        logger.debug("Resolved %s to %s", name, tip)
        return tip

    raise BranchNotFoundError(f"Branch {name!r} not found")
