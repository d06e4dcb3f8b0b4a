"""CLI for release-note-labeler."""

import json
from pathlib import Path
from typing import Annotated, Literal

import structlog
from cyclopts import App, Parameter

from release_note_labeler.backend import Backend
from release_note_labeler.backends import GitHubBackend
from release_note_labeler.config import get_config
from release_note_labeler.config_commands import config_app
from release_note_labeler.notes import classify as classify_note
from release_note_labeler.notes import get_release_note
from release_note_labeler.reconciler import dispatch

logger = structlog.get_logger()

app = App(
    name="rnl",
    help="Release Note Labeler - keeps release-note labels on pull requests in sync",
)

app.command(config_app)


def configure_logging(log_level: str) -> None:
    """Configure structlog with the specified log level."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(min_level=log_level.lower()))


def get_backend() -> Backend:
    """Get a GitHub backend from the configuration."""
    config = get_config()
    token = config.get("github.token")
    if not token:
        raise ValueError(
            "GitHub token not configured. Set it using:\n"
            "  rnl config set github.token <token>\n"
            "or export GITHUB_TOKEN."
        )
    return GitHubBackend(token=token, base_url=config.get("github.base_url"))


@app.command
def handle(event_name: str, payload_file: Path) -> None:
    """Process one webhook event.

    Args:
        event_name: GitHub event name, "issue_comment" or "pull_request"
        payload_file: File holding the JSON webhook payload
    """
    with open(payload_file, "r") as f:
        payload = json.load(f)
    logger.info("Handling event", event_name=event_name, action=payload.get("action"))
    dispatch(get_backend(), event_name, payload)


@app.command
def classify(body_file: Path) -> None:
    """Show the label a pull request body would receive."""
    note = get_release_note(body_file.read_text())
    outcome = classify_note(note)
    print(f"Release note: {note or '(none)'}")
    print(f"Label: {outcome.label}")


@app.meta.default
def main(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    log_level: Literal["debug", "info", "warning", "error", "critical"] = "critical",
) -> None:
    """Main entry point with global options."""
    configure_logging(log_level)
    app(tokens)


if __name__ == "__main__":
    app.meta()
