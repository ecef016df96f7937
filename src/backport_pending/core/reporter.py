"""Difference reporting between a mainline and a backport branch."""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from backport_pending.config import Settings
from backport_pending.core.history import HistoryCollector
from backport_pending.core.repository import repository, resolve_branch
from backport_pending.models.commit import CommitRecord

logger = logging.getLogger(__name__)


class DifferenceReporter:
    """Finds mainline commits whose identity is missing from the backport branch."""

    def __init__(self, collector: HistoryCollector, timestamp_format: str = "datetime"):
        self.collector = collector
        self.timestamp_format = timestamp_format

    def pending(
        self, main_tip: str, backport_tip: str, cutoff: datetime
    ) -> List[CommitRecord]:
        """Return backport-pending records, oldest first."""
        main_set = self.collector.collect(main_tip, cutoff)
        backport_set = self.collector.collect(backport_tip, cutoff)

        pending = main_set - backport_set
        logger.info(
            "%d mainline, %d backport, %d pending",
            len(main_set),
            len(backport_set),
            len(pending),
        )
        return sorted(pending, key=lambda record: record.chronological_key)

    def report(self, main_tip: str, backport_tip: str, cutoff: datetime) -> List[str]:
        """Render backport-pending records as ``"<summary> (<timestamp>)"`` lines."""
        return [
            record.render(self.timestamp_format)
            for record in self.pending(main_tip, backport_tip, cutoff)
        ]


def report_branches(
    repo_path: Union[str, Path],
    cutoff: datetime,
    settings: Optional[Settings] = None,
) -> List[str]:
    """Open ``repo_path``, compare its configured branches and render the result."""
    settings = settings or Settings()
    with repository(repo_path) as repo:
        main_tip = resolve_branch(repo, settings.main_branch)
        backport_tip = resolve_branch(repo, settings.backport_branch)

        collector = HistoryCollector(
            repo, collapse_unnumbered=settings.collapse_unnumbered
        )
        reporter = DifferenceReporter(collector, settings.timestamp_format)
        return reporter.report(main_tip, backport_tip, cutoff)
