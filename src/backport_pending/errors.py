"""Exceptions raised while classifying backport-pending commits."""


class BackportPendingError(Exception):
    """Base class for every failure that aborts a run."""


class RepositoryAccessError(BackportPendingError):
    """The repository or one of its revisions could not be read."""


class RepositoryNotFoundError(RepositoryAccessError):
    """No git repository exists at the given path."""


class BranchNotFoundError(BackportPendingError):
    """A branch name does not resolve to a tip revision."""


class MalformedCommitError(BackportPendingError):
    """A commit carries no message to classify."""


class InvalidCutoffError(BackportPendingError):
    """The cutoff timestamp could not be parsed."""


class ConfigError(BackportPendingError):
    """The repository's configuration file is unreadable or invalid."""
