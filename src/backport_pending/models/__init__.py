"""Data models for backport-pending."""

from .commit import CommitRecord, format_timestamp, parse_pr_number, summary_line

__all__ = ["CommitRecord", "format_timestamp", "parse_pr_number", "summary_line"]
