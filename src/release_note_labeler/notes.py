"""Extract and classify the release-note block of a pull request body."""

import re

from release_note_labeler.models import ReleaseNoteOutcome

NONE_NOTE = "none"
ACTION_REQUIRED_NOTE = "action required"

NOTE_MATCHER_RE = re.compile(
    r"(?:Release note\*\*:\s*(?:<!--[^<>]*-->\s*)?```(?:release-note)?|```release-note)(.+?)```",
    re.DOTALL,
)


def get_release_note(body: str) -> str:
    """Return the trimmed contents of the first release-note block, or "" if there is none."""
    match = NOTE_MATCHER_RE.search(body)
    if match is None:
        return ""
    return match.group(1).strip()


def classify(note: str) -> ReleaseNoteOutcome:
    """Map release note text to an outcome.

    Checks run in order: empty, exactly "none", contains "action required",
    anything else. Case and surrounding whitespace are ignored, so every
    string maps to exactly one outcome.
    """
    note = note.strip().lower()
    if not note:
        return ReleaseNoteOutcome.NEEDED
    if note == NONE_NOTE:
        return ReleaseNoteOutcome.NONE
    if ACTION_REQUIRED_NOTE in note:
        return ReleaseNoteOutcome.ACTION_REQUIRED
    return ReleaseNoteOutcome.STANDARD


def determine_release_note_outcome(body: str) -> ReleaseNoteOutcome:
    """Classify the release-note block of a pull request body."""
    return classify(get_release_note(body))
