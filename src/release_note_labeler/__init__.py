"""Release note labeler: keeps release-note labels on pull requests in sync with their body text."""

__version__ = "0.1.0"
