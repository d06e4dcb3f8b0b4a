"""Exceptions raised by release note labeler."""


class ReleaseNoteError(Exception):
    """Base class for release note labeler errors."""


class BackendError(ReleaseNoteError):
    """A call against the issue tracker failed."""


class LabelRemovalError(ReleaseNoteError):
    """One or more label removals failed.

    Every removal is attempted before this is raised, so ``errors`` holds
    each underlying failure in the order it happened.
    """

    def __init__(self, errors: list[Exception]) -> None:
        self.errors = errors
        super().__init__(f"encountered {len(errors)} errors setting labels: {[str(e) for e in errors]}")
