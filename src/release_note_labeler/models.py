"""Data models for release note labeler."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from release_note_labeler import labels as rn


class ReleaseNoteOutcome(Enum):
    """What the release-note block of a pull request body asks for."""

    NEEDED = rn.RELEASE_NOTE_LABEL_NEEDED
    NONE = rn.RELEASE_NOTE_NONE
    ACTION_REQUIRED = rn.RELEASE_NOTE_ACTION_REQUIRED
    STANDARD = rn.RELEASE_NOTE

    @property
    def label(self) -> str:
        """The label that records this outcome on a pull request."""
        return self.value


class CommentCommand(Enum):
    """Slash commands recognized in comments."""

    NOTE = "/release-note"
    NONE = "/release-note-none"
    ACTION_REQUIRED = "/release-note-action-required"

    @property
    def deprecated(self) -> bool:
        return self is not CommentCommand.NONE


@dataclass(frozen=True)
class Label:
    """A label attached to an issue or pull request."""

    name: str


@dataclass(frozen=True)
class Comment:
    """An issue comment."""

    id: int
    author: str
    body: str
    html_url: str = ""


@dataclass(frozen=True)
class CherrypickReference:
    """A "Cherry pick of #N on release-X.Y." line from a pull request body."""

    parent_number: int
    release_branch: str


@dataclass
class PullRequestView:
    """Read-only view of a pull request."""

    owner: str
    repo: str
    number: int
    author: str
    body: str = ""
    base_ref: str = ""
    labels: list[Label] = field(default_factory=list)


@dataclass
class IssueCommentEvent:
    """An issue_comment webhook event."""

    action: str
    owner: str
    repo: str
    number: int
    issue_author: str
    issue_body: str
    is_pull_request: bool
    comment: Comment
    issue_labels: list[Label] = field(default_factory=list)

    def is_author(self, login: str) -> bool:
        return self.issue_author.lower() == login.lower()

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "IssueCommentEvent":
        """Build an event from a GitHub issue_comment webhook payload."""
        issue = payload["issue"]
        comment = payload["comment"]
        repository = payload["repository"]
        return cls(
            action=payload.get("action", ""),
            owner=repository["owner"]["login"],
            repo=repository["name"],
            number=issue["number"],
            issue_author=issue["user"]["login"],
            issue_body=issue.get("body") or "",
            is_pull_request=issue.get("pull_request") is not None,
            comment=Comment(
                id=comment["id"],
                author=comment["user"]["login"],
                body=comment.get("body") or "",
                html_url=comment.get("html_url", ""),
            ),
            issue_labels=[Label(name=label["name"]) for label in issue.get("labels") or []],
        )


@dataclass
class PullRequestEvent:
    """A pull_request webhook event."""

    action: str
    pull_request: PullRequestView

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "PullRequestEvent":
        """Build an event from a GitHub pull_request webhook payload."""
        pr = payload["pull_request"]
        repository = payload["repository"]
        return cls(
            action=payload.get("action", ""),
            pull_request=PullRequestView(
                owner=repository["owner"]["login"],
                repo=repository["name"],
                number=payload.get("number", pr["number"]),
                author=pr["user"]["login"],
                body=pr.get("body") or "",
                base_ref=pr["base"]["ref"],
                labels=[Label(name=label["name"]) for label in pr.get("labels") or []],
            ),
        )


def has_label(label: str, labels: list[Label]) -> bool:
    """Check for a label by name, ignoring case."""
    label = label.lower()
    return any(existing.name.lower() == label for existing in labels)
