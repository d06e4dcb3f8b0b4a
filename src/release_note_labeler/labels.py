"""Label names and the advisory comment texts built from them.

All texts are rendered from the label constants so renaming a label keeps
every comment (and the stale comment detection that depends on them) in sync.
"""

RELEASE_NOTE = "release-note"
RELEASE_NOTE_NONE = "release-note-none"
RELEASE_NOTE_ACTION_REQUIRED = "release-note-action-required"
RELEASE_NOTE_LABEL_NEEDED = "do-not-merge/release-note-label-needed"
# Older spelling of the needed label. Removed when found, never applied.
DEPRECATED_RELEASE_NOTE_LABEL_NEEDED = "release-note-label-needed"

ALL_RELEASE_NOTE_LABELS: tuple[str, ...] = (
    RELEASE_NOTE_NONE,
    RELEASE_NOTE_ACTION_REQUIRED,
    DEPRECATED_RELEASE_NOTE_LABEL_NEEDED,
    RELEASE_NOTE_LABEL_NEEDED,
    RELEASE_NOTE,
)

# Labels that mean the release note process has been completed.
SETTLED_RELEASE_NOTE_LABELS: tuple[str, ...] = (
    RELEASE_NOTE,
    RELEASE_NOTE_ACTION_REQUIRED,
    RELEASE_NOTE_NONE,
)

NEEDED_LABELS: tuple[str, ...] = (RELEASE_NOTE_LABEL_NEEDED, DEPRECATED_RELEASE_NOTE_LABEL_NEEDED)

TRUNK_BRANCH = "master"

DOCS_URL = (
    "https://github.com/kubernetes/community/blob/master/contributors/devel/"
    "pull-requests.md#write-release-notes-if-needed"
)

_NEEDED_FORMAT = "Adding {label} because the release note process has not been followed."

RELEASE_NOTE_NEEDED_BODY = _NEEDED_FORMAT.format(label=RELEASE_NOTE_LABEL_NEEDED)
DEPRECATED_RELEASE_NOTE_NEEDED_BODY = _NEEDED_FORMAT.format(label=DEPRECATED_RELEASE_NOTE_LABEL_NEEDED)

RELEASE_NOTE_NEEDED_SUFFIX = (
    f'One of the following labels is required "{RELEASE_NOTE}", "{RELEASE_NOTE_ACTION_REQUIRED}", '
    f'or "{RELEASE_NOTE_NONE}".\n'
    f"Please see: {DOCS_URL}."
)

PARENT_RELEASE_NOTE_BODY = (
    f"All 'parent' PRs of a cherry-pick PR must have one of the \"{RELEASE_NOTE}\" or "
    f'"{RELEASE_NOTE_ACTION_REQUIRED}" labels, or this PR must follow the standard/parent '
    "release note labeling requirement."
)

DEPRECATED_COMMAND_BODY = (
    f"the `/{RELEASE_NOTE}` and `/{RELEASE_NOTE_ACTION_REQUIRED}` commands have been deprecated.\n"
    f"Please edit the `{RELEASE_NOTE}` block in the PR body text to include the release note. "
    "If the release note requires additional action include the string `action required` "
    "in the release note. For example:\n"
    "````\n"
    f"```{RELEASE_NOTE}\n"
    "Some release note with action required.\n"
    "```\n"
    "````"
)

NOT_AUTHORIZED_BODY = (
    f"you can only set the release note label to {RELEASE_NOTE_NONE} "
    "if you are the PR author or an org member."
)

BLOCK_NOT_EMPTY_BODY = (
    f"you can only set the release note label to {RELEASE_NOTE_NONE} "
    f'if the {RELEASE_NOTE} block in the PR body text is empty or "none".'
)

# Bot comments containing any of these are retracted once the PR settles.
STALE_COMMENT_MARKERS: tuple[str, ...] = (
    RELEASE_NOTE_NEEDED_BODY,
    DEPRECATED_RELEASE_NOTE_NEEDED_BODY,
    DEPRECATED_COMMAND_BODY,
    PARENT_RELEASE_NOTE_BODY,
)


def parent_release_note_reason(noteless_parents: list[int]) -> str:
    """Explain which cherry-pick parents are missing a release note label."""
    parents = ", ".join(f"#{number}" for number in noteless_parents)
    return (
        f'The following parent PRs have neither the "{RELEASE_NOTE}" nor the '
        f'"{RELEASE_NOTE_ACTION_REQUIRED}" labels: {parents}.'
    )
