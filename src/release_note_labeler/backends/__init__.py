"""Backend implementations."""

from release_note_labeler.backends.github import GitHubBackend

__all__ = ["GitHubBackend"]
