"""Backend interface for the issue tracker the labeler talks to."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from release_note_labeler.models import Comment, Label


class Backend(ABC):
    """Abstract base class for issue tracker backends.

    Implementations raise ``BackendError`` when a call fails.
    """

    @abstractmethod
    def is_member(self, org: str, user: str) -> bool:
        """Check whether a user belongs to an organization."""
        pass

    @abstractmethod
    def create_comment(self, owner: str, repo: str, number: int, body: str) -> None:
        """Post a comment on an issue or pull request."""
        pass

    @abstractmethod
    def add_label(self, owner: str, repo: str, number: int, label: str) -> None:
        """Add a label to an issue or pull request."""
        pass

    @abstractmethod
    def remove_label(self, owner: str, repo: str, number: int, label: str) -> None:
        """Remove a label from an issue or pull request."""
        pass

    @abstractmethod
    def get_issue_labels(self, owner: str, repo: str, number: int) -> list[Label]:
        """List the labels currently on an issue or pull request."""
        pass

    @abstractmethod
    def list_issue_comments(self, owner: str, repo: str, number: int) -> list[Comment]:
        """List the comments on an issue or pull request."""
        pass

    @abstractmethod
    def delete_stale_comments(
        self,
        owner: str,
        repo: str,
        number: int,
        comments: list[Comment] | None,
        is_stale: Callable[[Comment], bool],
    ) -> None:
        """Delete every comment for which ``is_stale`` returns True.

        If ``comments`` is None the issue's comments are listed first.
        """
        pass

    @abstractmethod
    def bot_name(self) -> str:
        """Login of the account the backend acts as."""
        pass
