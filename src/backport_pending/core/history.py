"""History collection: the set of commit records reachable from a branch tip."""

import contextlib
import logging
from datetime import datetime, timezone
from typing import Iterator, Set

import git
from git import Repo

from backport_pending.errors import RepositoryAccessError
from backport_pending.models.commit import CommitRecord, parse_pr_number, summary_line

logger = logging.getLogger(__name__)


class HistoryCollector:
    """Walks a branch's history and reduces it to distinct commit records."""

    def __init__(self, repo: Repo, collapse_unnumbered: bool = False):
        self.repo = repo
        # Records without a PR number all share identity 0 when set.
        self.collapse_unnumbered = collapse_unnumbered

    def iter_revisions(self, tip: str) -> Iterator[git.Commit]:
        """Lazily yield every revision reachable from ``tip``, newest first."""
        try:
            yield from self.repo.iter_commits(tip, date_order=True)
        except (git.exc.GitError, git.exc.ODBError, ValueError, OSError) as e:
            raise RepositoryAccessError(f"Cannot walk history from {tip}: {e}") from e

    def record_for(self, commit: git.Commit) -> CommitRecord:
        """Build the commit record for a single revision."""
        try:
            message = commit.message
            authored_date = commit.authored_date
            hexsha = commit.hexsha
        except (git.exc.GitError, git.exc.ODBError, ValueError, OSError) as e:
            raise RepositoryAccessError(f"Cannot load revision {commit}: {e}") from e

        if isinstance(message, bytes):
            message = message.decode("utf-8", errors="replace")
        summary = summary_line(message)

        identity = parse_pr_number(summary)
        if identity is None and self.collapse_unnumbered:
            identity = 0

        return CommitRecord(
            summary=summary,
            identity=identity,
            timestamp=datetime.fromtimestamp(authored_date, tz=timezone.utc),
            hexsha=hexsha,
        )

    def collect(self, tip: str, cutoff: datetime) -> Set[CommitRecord]:
        """Return distinct records reachable from ``tip`` at or after ``cutoff``.

        The whole history is walked: revision order is not guaranteed to be
        monotonic in time across merges, so crossing the cutoff once does
        not end the walk.
        """
        records: Set[CommitRecord] = set()
        visited = 0
        with contextlib.closing(self.iter_revisions(tip)) as revisions:
            for commit in revisions:
                visited += 1
                record = self.record_for(commit)
                if record.timestamp < cutoff:
                    continue
                # Last seen wins for a repeated identity.
                records.discard(record)
                records.add(record)

        logger.info(
            "Collected %d of %d revisions from %s", len(records), visited, tip[:12]
        )
        return records
