"""GitHub REST API backend implementation using PyGithub."""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

import structlog
from github import Auth, Github, GithubException, UnknownObjectException
from github.Issue import Issue
from github.IssueComment import IssueComment

from release_note_labeler.backend import Backend
from release_note_labeler.exceptions import BackendError
from release_note_labeler.models import Comment, Label

logger = structlog.get_logger()


@contextmanager
def _github_call(action: str, **context: Any) -> Iterator[None]:
    """Turn PyGithub failures into BackendError."""
    try:
        yield
    except GithubException as e:
        logger.debug("GitHub call failed", action=action, status=e.status, **context)
        raise BackendError(f"failed to {action}: {e}") from e


class GitHubBackend(Backend):
    """Backend talking to GitHub issues and pull requests."""

    def __init__(self, token: str | None = None, base_url: str | None = None) -> None:
        """Initialize GitHub backend.

        Args:
            token: GitHub personal access token or app installation token
            base_url: API URL for GitHub Enterprise, defaults to github.com
        """
        self.token = token
        if not self.token:
            raise ValueError("GitHub token required")

        kwargs: dict[str, Any] = {"auth": Auth.Token(self.token)}
        if base_url:
            kwargs["base_url"] = base_url
        self.client = Github(**kwargs)
        self._bot_name: str | None = None
        logger.info("GitHub backend initialized", base_url=base_url or "https://api.github.com")

    def _issue(self, owner: str, repo: str, number: int) -> Issue:
        return self.client.get_repo(f"{owner}/{repo}").get_issue(number=number)

    @staticmethod
    def _to_comment(comment: IssueComment) -> Comment:
        return Comment(
            id=comment.id,
            author=comment.user.login if comment.user else "",
            body=comment.body or "",
            html_url=comment.html_url,
        )

    def is_member(self, org: str, user: str) -> bool:
        """Check organization membership.

        Repositories owned by a user rather than an organization have no
        members, so a missing organization (or user) means "not a member".
        """
        logger.debug("Checking org membership", org=org, user=user)
        with _github_call("check membership", org=org, user=user):
            try:
                organization = self.client.get_organization(org)
                return organization.has_in_members(self.client.get_user(user))
            except UnknownObjectException:
                logger.debug("No such organization or user, treating as non-member", org=org, user=user)
                return False

    def create_comment(self, owner: str, repo: str, number: int, body: str) -> None:
        """Post a comment."""
        logger.info("Creating comment", owner=owner, repo=repo, number=number)
        with _github_call("create comment", owner=owner, repo=repo, number=number):
            self._issue(owner, repo, number).create_comment(body)

    def add_label(self, owner: str, repo: str, number: int, label: str) -> None:
        """Add a label."""
        logger.info("Adding label", owner=owner, repo=repo, number=number, label=label)
        with _github_call("add label", owner=owner, repo=repo, number=number, label=label):
            self._issue(owner, repo, number).add_to_labels(label)

    def remove_label(self, owner: str, repo: str, number: int, label: str) -> None:
        """Remove a label."""
        logger.info("Removing label", owner=owner, repo=repo, number=number, label=label)
        with _github_call("remove label", owner=owner, repo=repo, number=number, label=label):
            self._issue(owner, repo, number).remove_from_labels(label)

    def get_issue_labels(self, owner: str, repo: str, number: int) -> list[Label]:
        """List labels."""
        logger.debug("Listing labels", owner=owner, repo=repo, number=number)
        with _github_call("list labels", owner=owner, repo=repo, number=number):
            labels = [Label(name=label.name) for label in self._issue(owner, repo, number).get_labels()]
        logger.debug("Listed labels", number=number, count=len(labels))
        return labels

    def list_issue_comments(self, owner: str, repo: str, number: int) -> list[Comment]:
        """List comments."""
        logger.debug("Listing comments", owner=owner, repo=repo, number=number)
        with _github_call("list comments", owner=owner, repo=repo, number=number):
            comments = [self._to_comment(comment) for comment in self._issue(owner, repo, number).get_comments()]
        logger.debug("Listed comments", number=number, count=len(comments))
        return comments

    def delete_stale_comments(
        self,
        owner: str,
        repo: str,
        number: int,
        comments: list[Comment] | None,
        is_stale: Callable[[Comment], bool],
    ) -> None:
        """Delete the comments matching ``is_stale``."""
        if comments is None:
            comments = self.list_issue_comments(owner, repo, number)

        stale = [comment for comment in comments if is_stale(comment)]
        if not stale:
            return

        with _github_call("delete comments", owner=owner, repo=repo, number=number):
            issue = self._issue(owner, repo, number)
            for comment in stale:
                logger.info("Deleting stale comment", owner=owner, repo=repo, number=number, comment_id=comment.id)
                issue.get_comment(comment.id).delete()

    def bot_name(self) -> str:
        """Login of the authenticated user."""
        if self._bot_name is None:
            with _github_call("look up authenticated user"):
                self._bot_name = self.client.get_user().login
        return self._bot_name
