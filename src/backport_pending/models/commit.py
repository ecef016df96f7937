"""Commit record model used to classify backport-pending commits."""

import re
from datetime import datetime, timezone
from typing import Optional, Tuple, Union

from pydantic import BaseModel

from backport_pending.errors import MalformedCommitError

# "(#1234)" anywhere in the summary; longer digit runs are not PR markers.
PR_MARKER = re.compile(r"\(#(\d{1,4})\)")

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

IdentityKey = Tuple[str, Union[int, str]]


def summary_line(message: Optional[str]) -> str:
    """Return the first line of a commit message."""
    if not message:
        raise MalformedCommitError("Commit has no message")
    return message.splitlines()[0]


def parse_pr_number(summary: str) -> Optional[int]:
    """Return the pull-request number referenced by ``summary``, if any."""
    match = PR_MARKER.search(summary)
    if match is None:
        return None
    return int(match.group(1))


class CommitRecord(BaseModel):
    """A commit reduced to what classification needs.

    Records compare equal when they share an identity. Numbered records
    are identified by their pull-request number; records without one fall
    back to the revision they were read from, so two unrelated unnumbered
    commits stay distinct while the same revision seen on both branches is
    still one entity.
    """

    summary: str
    identity: Optional[int] = None
    timestamp: datetime
    hexsha: str

    model_config = {"frozen": True}

    @property
    def identity_key(self) -> IdentityKey:
        if self.identity is None:
            return ("commit", self.hexsha)
        return ("pr", self.identity)

    @property
    def chronological_key(self) -> Tuple[datetime, bool, int, str]:
        """Sort key for output: timestamp first, identity as tie-break."""
        return (self.timestamp,) + self._numeric_key()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CommitRecord):
            return NotImplemented
        return self.identity_key == other.identity_key

    def __hash__(self) -> int:
        return hash(self.identity_key)

    def __lt__(self, other: "CommitRecord") -> bool:
        if not isinstance(other, CommitRecord):
            return NotImplemented
        return self._numeric_key() < other._numeric_key()

    def _numeric_key(self) -> Tuple[bool, int, str]:
        # Numbered records first, by number; unnumbered ones after.
        if self.identity is None:
            return (True, 0, self.hexsha)
        return (False, self.identity, "")

    def render(self, timestamp_format: str = "datetime") -> str:
        """Render as ``"<summary> (<timestamp>)"``."""
        return f"{self.summary} ({format_timestamp(self.timestamp, timestamp_format)})"


def format_timestamp(timestamp: datetime, timestamp_format: str = "datetime") -> str:
    """Format a UTC timestamp for display."""
    timestamp = timestamp.astimezone(timezone.utc)
    if timestamp_format == "epoch":
        return str(int(timestamp.timestamp()))
    if timestamp_format == "iso":
        return timestamp.isoformat()
    if timestamp_format == "datetime":
        return timestamp.strftime(TIMESTAMP_FORMAT)
    raise ValueError(f"Unknown timestamp format: {timestamp_format}")
