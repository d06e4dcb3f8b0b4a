"""Formatting for comments the bot posts."""

from release_note_labeler.models import Comment

ABOUT_THIS_BOT = (
    "Instructions for interacting with me using PR comments are available in the repository's "
    "contributor guide. If you have questions or suggestions related to my behavior, please file an "
    "issue against the bot's repository."
)


def format_response(to: str, message: str, reason: str) -> str:
    """Address a message to a user, with the reason tucked into a details block."""
    return f"@{to}: {message}\n\n<details>\n\n{reason}\n\n{ABOUT_THIS_BOT}\n</details>"


def format_comment_response(comment: Comment, message: str) -> str:
    """Reply to a comment, quoting it."""
    quoted = "\n".join(">" + line for line in comment.body.split("\n"))
    reason = f"In response to [this]({comment.html_url}):\n\n{quoted}\n"
    return format_response(comment.author, message, reason)
