"""Decide whether a pull request has to go through the release note process.

Pull requests against the trunk always do. A cherry-pick onto a release
branch is exempt when every parent it names already carries a release note
label; the parents' notes cover it.
"""

import structlog

from release_note_labeler import labels as rn
from release_note_labeler.backend import Backend
from release_note_labeler.commands import get_cherrypick_parent_numbers
from release_note_labeler.exceptions import BackendError
from release_note_labeler.models import Label, PullRequestView, has_label
from release_note_labeler.responses import format_response

logger = structlog.get_logger()


def noteless_parents(backend: Backend, pr: PullRequestView, parents: list[int]) -> list[int]:
    """Return the parents that have neither the release-note nor the action-required label.

    Parents whose labels cannot be fetched are skipped.
    """
    missing = []
    for parent in parents:
        try:
            parent_labels = backend.get_issue_labels(pr.owner, pr.repo, parent)
        except BackendError as e:
            logger.error("Failed to list labels on parent PR", parent=parent, number=pr.number, error=str(e))
            continue
        if not has_label(rn.RELEASE_NOTE, parent_labels) and not has_label(
            rn.RELEASE_NOTE_ACTION_REQUIRED, parent_labels
        ):
            missing.append(parent)
    return missing


def must_follow_process(backend: Backend, pr: PullRequestView, pr_labels: list[Label], comment: bool) -> bool:
    """Check whether ``pr`` must carry its own release note label.

    With ``comment`` set, and the needed label not already on the pull
    request, an advisory comment naming the parents without a release note
    is posted. Failing to post it is logged only.
    """
    if pr.base_ref == rn.TRUNK_BRANCH:
        return True

    parents = get_cherrypick_parent_numbers(pr.body)
    if not parents:
        return True

    missing = noteless_parents(backend, pr, parents)
    if not missing:
        logger.debug("All cherry-pick parents have release notes", number=pr.number, parents=parents)
        return False

    if comment and not has_label(rn.RELEASE_NOTE_LABEL_NEEDED, pr_labels):
        body = format_response(pr.author, rn.PARENT_RELEASE_NOTE_BODY, rn.parent_release_note_reason(missing))
        try:
            backend.create_comment(pr.owner, pr.repo, pr.number, body)
        except BackendError as e:
            logger.error("Failed to comment about noteless parents", number=pr.number, error=str(e))
    return True
