"""Cutoff timestamp parsing."""

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

from backport_pending.errors import InvalidCutoffError
from backport_pending.models.commit import TIMESTAMP_FORMAT


def parse_cutoff(text: str) -> datetime:
    """Parse a cutoff into an aware UTC datetime.

    ``YYYY-MM-DD HH:MM:SS`` is read as UTC. RFC 2822 dates such as
    ``18 Feb 2023 23:00:00 GMT`` are accepted too and converted to UTC.
    """
    text = text.strip()
    try:
        return datetime.strptime(text, TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError:
        pass

    try:
        parsed = parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        parsed = None
    if parsed is None:
        raise InvalidCutoffError(
            f"Invalid cutoff {text!r}: expected 'YYYY-MM-DD HH:MM:SS' or an RFC 2822 date"
        )
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
