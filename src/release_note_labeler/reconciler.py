"""Keep the release note label of a pull request in sync with its body and comments.

Both handlers derive the wanted label from scratch on every event, so running
them again on the same state changes nothing.
"""

from collections.abc import Callable
from typing import Any

import structlog

from release_note_labeler import labels as rn
from release_note_labeler.backend import Backend
from release_note_labeler.commands import contains_none_command, parse_command
from release_note_labeler.exceptions import BackendError, LabelRemovalError
from release_note_labeler.models import (
    Comment,
    IssueCommentEvent,
    Label,
    PullRequestEvent,
    PullRequestView,
    ReleaseNoteOutcome,
    has_label,
)
from release_note_labeler.notes import determine_release_note_outcome
from release_note_labeler.policy import must_follow_process
from release_note_labeler.responses import format_comment_response, format_response

logger = structlog.get_logger()

COMMENT_ACTION_CREATED = "created"
PULL_REQUEST_ACTIONS = ("opened", "edited")


def remove_other_labels(
    remover: Callable[[str], None],
    keep: str,
    label_set: tuple[str, ...],
    current_labels: list[Label],
) -> None:
    """Remove every label of ``label_set`` present in ``current_labels`` except ``keep``.

    All removals are attempted; failures are raised together as a LabelRemovalError.
    """
    errors: list[Exception] = []
    for label in label_set:
        if label != keep and has_label(label, current_labels):
            try:
                remover(label)
            except BackendError as e:
                errors.append(e)
    if errors:
        raise LabelRemovalError(errors)


def handle_comment(backend: Backend, event: IssueCommentEvent) -> None:
    """React to a release note command left in a new pull request comment."""
    if not event.is_pull_request or event.action != COMMENT_ACTION_CREATED:
        return

    owner, repo, number = event.owner, event.repo, event.number
    command = parse_command(event.comment.body)
    if command is None:
        return

    log = logger.bind(owner=owner, repo=repo, number=number, command=command.value)

    if command.deprecated:
        log.info("Deprecated release note command used")
        backend.create_comment(owner, repo, number, format_comment_response(event.comment, rn.DEPRECATED_COMMAND_BODY))
        return

    commenter = event.comment.author
    is_member = backend.is_member(owner, commenter)
    if not is_member and not event.is_author(commenter):
        log.info("Rejecting release note command from outsider", commenter=commenter)
        backend.create_comment(owner, repo, number, format_comment_response(event.comment, rn.NOT_AUTHORIZED_BODY))
        return

    block_outcome = determine_release_note_outcome(event.issue_body)
    if block_outcome in (ReleaseNoteOutcome.STANDARD, ReleaseNoteOutcome.ACTION_REQUIRED):
        log.info("Rejecting release note command, body has a release note", outcome=block_outcome.name)
        backend.create_comment(owner, repo, number, format_comment_response(event.comment, rn.BLOCK_NOT_EMPTY_BODY))
        return

    if not has_label(rn.RELEASE_NOTE_NONE, event.issue_labels):
        backend.add_label(owner, repo, number, rn.RELEASE_NOTE_NONE)

    remove_other_labels(
        lambda label: backend.remove_label(owner, repo, number, label),
        rn.RELEASE_NOTE_NONE,
        rn.ALL_RELEASE_NOTE_LABELS,
        event.issue_labels,
    )


def ensure_no_needed_label(backend: Backend, pr: PullRequestView, pr_labels: list[Label]) -> list[Label]:
    """Drop both spellings of the needed label, logging failures.

    Returns the labels still on the pull request afterwards.
    """
    removed = set()
    for label in rn.NEEDED_LABELS:
        if not has_label(label, pr_labels):
            continue
        try:
            backend.remove_label(pr.owner, pr.repo, pr.number, label)
        except BackendError as e:
            logger.error(
                "Failed to remove label", label=label, repo=f"{pr.owner}/{pr.repo}", number=pr.number, error=str(e)
            )
            continue
        removed.add(label.lower())
    return [label for label in pr_labels if label.name.lower() not in removed]


def release_note_already_added(pr_labels: list[Label]) -> bool:
    return any(has_label(label, pr_labels) for label in rn.SETTLED_RELEASE_NOTE_LABELS)


def stale_comment_predicate(bot_name: str) -> Callable[[Comment], bool]:
    """Match advisory comments the bot posted earlier."""

    def is_stale(comment: Comment) -> bool:
        return comment.author == bot_name and any(marker in comment.body for marker in rn.STALE_COMMENT_MARKERS)

    return is_stale


def clear_stale_comments(
    backend: Backend,
    pr: PullRequestView,
    pr_labels: list[Label],
    comments: list[Comment] | None,
) -> None:
    """Delete old advisory comments unless the pull request still owes a release note."""
    if must_follow_process(backend, pr, pr_labels, comment=False) and not release_note_already_added(pr_labels):
        return
    bot_name = backend.bot_name()
    backend.delete_stale_comments(pr.owner, pr.repo, pr.number, comments, stale_comment_predicate(bot_name))


def handle_pull_request(backend: Backend, event: PullRequestEvent) -> None:
    """Label a pull request from the release-note block of its body."""
    if event.action not in PULL_REQUEST_ACTIONS:
        return

    pr = event.pull_request
    log = logger.bind(owner=pr.owner, repo=pr.repo, number=pr.number)

    try:
        pr_labels = backend.get_issue_labels(pr.owner, pr.repo, pr.number)
    except BackendError as e:
        raise BackendError(f"failed to list labels on PR #{pr.number}: {e}") from e

    comments: list[Comment] | None = None
    label_to_add = determine_release_note_outcome(pr.body).label
    if label_to_add == rn.RELEASE_NOTE_LABEL_NEEDED:
        if not must_follow_process(backend, pr, pr_labels, comment=True):
            log.info("Cherry-pick parents carry release notes, PR is exempt")
            pr_labels = ensure_no_needed_label(backend, pr, pr_labels)
            clear_stale_comments(backend, pr, pr_labels, None)
            return
        # A /release-note-none left on the PR stands in for an empty block.
        try:
            comments = backend.list_issue_comments(pr.owner, pr.repo, pr.number)
        except BackendError as e:
            raise BackendError(f"failed to list comments on {pr.owner}/{pr.repo}#{pr.number}: {e}") from e
        if contains_none_command(comments):
            label_to_add = rn.RELEASE_NOTE_NONE

    if label_to_add == rn.RELEASE_NOTE_LABEL_NEEDED:
        if not has_label(rn.RELEASE_NOTE_LABEL_NEEDED, pr_labels):
            body = format_response(pr.author, rn.RELEASE_NOTE_NEEDED_BODY, rn.RELEASE_NOTE_NEEDED_SUFFIX)
            try:
                backend.create_comment(pr.owner, pr.repo, pr.number, body)
            except BackendError as e:
                log.error("Failed to post release note needed comment", error=str(e))
    else:
        pr_labels = ensure_no_needed_label(backend, pr, pr_labels)

    if not has_label(label_to_add, pr_labels):
        backend.add_label(pr.owner, pr.repo, pr.number, label_to_add)

    try:
        remove_other_labels(
            lambda label: backend.remove_label(pr.owner, pr.repo, pr.number, label),
            label_to_add,
            rn.ALL_RELEASE_NOTE_LABELS,
            pr_labels,
        )
    except LabelRemovalError as e:
        log.error("Failed to remove release note labels", error=str(e))

    log.info("Release note label reconciled", label=label_to_add)
    clear_stale_comments(backend, pr, pr_labels, comments)


def dispatch(backend: Backend, event_name: str, payload: dict[str, Any]) -> None:
    """Route a webhook payload to the handler for its event type."""
    if event_name == "issue_comment":
        handle_comment(backend, IssueCommentEvent.from_payload(payload))
    elif event_name == "pull_request":
        handle_pull_request(backend, PullRequestEvent.from_payload(payload))
    else:
        logger.debug("Ignoring event", event_name=event_name)
