"""Recognize release note commands in comments and cherry-pick lines in pull request bodies."""

import re

from release_note_labeler.models import CherrypickReference, Comment, CommentCommand

RELEASE_NOTE_RE = re.compile(r"^/release-note\s*$", re.IGNORECASE | re.MULTILINE)
RELEASE_NOTE_NONE_RE = re.compile(r"^/release-note-none\s*$", re.IGNORECASE | re.MULTILINE)
RELEASE_NOTE_ACTION_REQUIRED_RE = re.compile(r"^/release-note-action-required\s*$", re.IGNORECASE | re.MULTILINE)

# Checked in this order; the first command that matches wins.
COMMAND_PATTERNS: tuple[tuple[CommentCommand, re.Pattern[str]], ...] = (
    (CommentCommand.NOTE, RELEASE_NOTE_RE),
    (CommentCommand.NONE, RELEASE_NOTE_NONE_RE),
    (CommentCommand.ACTION_REQUIRED, RELEASE_NOTE_ACTION_REQUIRED_RE),
)

CHERRYPICK_RE = re.compile(r"Cherry pick of #([0-9]+) on release-([0-9]+\.[0-9]+).")


def parse_command(body: str) -> CommentCommand | None:
    """Return the release note command in a comment body, if any."""
    for command, pattern in COMMAND_PATTERNS:
        if pattern.search(body):
            return command
    return None


def contains_none_command(comments: list[Comment]) -> bool:
    """Check whether any comment carries /release-note-none."""
    return any(RELEASE_NOTE_NONE_RE.search(comment.body) for comment in comments)


def get_cherrypick_references(body: str) -> list[CherrypickReference]:
    """Collect cherry-pick references from a pull request body, one per matching line, in order.

    Lines that only look like a reference (say ``#abc`` instead of a number)
    do not match and are skipped.
    """
    references = []
    for line in body.split("\n"):
        match = CHERRYPICK_RE.search(line)
        if match is None:
            continue
        references.append(
            CherrypickReference(parent_number=int(match.group(1)), release_branch=f"release-{match.group(2)}")
        )
    return references


def get_cherrypick_parent_numbers(body: str) -> list[int]:
    """Parent pull request numbers of a cherry-pick, duplicates kept."""
    return [reference.parent_number for reference in get_cherrypick_references(body)]
