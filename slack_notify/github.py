"""GitHub Actions run context: environment, event payload and event subject."""

import json
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IssueSubject:
    number: int


@dataclass(frozen=True)
class PullRequestSubject:
    number: int


@dataclass(frozen=True)
class OtherSubject:
    pass


EventSubject = Union[IssueSubject, PullRequestSubject, OtherSubject]


def _has_object(payload: Any, key: str) -> bool:
    return isinstance(payload, Mapping) and isinstance(payload.get(key), Mapping)


def classify_event(payload: Any) -> EventSubject:
    """
    Resolve what the triggering event is about.

    The issue and pull request checks are independent; when a payload
    carries both objects the pull request wins.
    """
    subject: EventSubject = OtherSubject()
    if _has_object(payload, "issue"):
        subject = IssueSubject(number=payload["issue"].get("number") or 0)
    if _has_object(payload, "pull_request"):
        subject = PullRequestSubject(number=payload["pull_request"].get("number") or 0)
    return subject


@dataclass(frozen=True)
class GitHubContext:
    """Context of the workflow run that invoked us."""
    owner: str
    repo: str
    ref: str
    event_name: str
    workflow: str
    run_id: str
    payload: dict = field(default_factory=dict)


def _load_payload(event_path: str) -> dict:
    if not event_path:
        return {}

    path = Path(event_path)
    if not path.is_file():
        logger.warning("GITHUB_EVENT_PATH %s does not exist", event_path)
        return {}

    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_github_context(environ: Optional[Mapping[str, str]] = None) -> GitHubContext:
    """
    Build the run context from the variables the Actions runner exports.

    Raises:
        ValueError: GITHUB_REPOSITORY is unset or not in ``owner/repo`` form.
    """
    env = os.environ if environ is None else environ

    repository = env.get("GITHUB_REPOSITORY", "")
    owner, sep, repo = repository.partition("/")
    if not sep or not owner or not repo:
        raise ValueError(
            "context.repo requires a GITHUB_REPOSITORY environment variable like 'owner/repo'"
        )

    return GitHubContext(
        owner=owner,
        repo=repo,
        ref=env.get("GITHUB_REF", ""),
        event_name=env.get("GITHUB_EVENT_NAME", ""),
        workflow=env.get("GITHUB_WORKFLOW", ""),
        run_id=env.get("GITHUB_RUN_ID", ""),
        payload=_load_payload(env.get("GITHUB_EVENT_PATH", "")),
    )
