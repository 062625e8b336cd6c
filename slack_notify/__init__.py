"""Post GitHub Actions workflow run notifications to Slack."""

__version__ = "0.1.0"
