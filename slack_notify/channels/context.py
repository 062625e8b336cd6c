"""GitHub run context rendered as mrkdwn fields."""

from typing import Any
from urllib.parse import quote

from slack_notify.channels import MrkdwnElement
from slack_notify.github import IssueSubject, PullRequestSubject, classify_event

GITHUB_URL = "https://github.com"


def _runs_query_url(repo_url: str, qualifier: str, value: str) -> str:
    # e.g. workflow:"CI" -> workflow%3A%22CI%22
    query = quote(f'{qualifier}:"{value}"', safe="")
    return f"{repo_url}/actions?query={query}"


def build_context_elements(
    owner: str,
    repo: str,
    payload: Any,
    ref: str,
    event_name: str,
    workflow: str,
    run_id: str,
) -> list[MrkdwnElement]:
    """
    Describe a workflow run as an ordered list of mrkdwn fields.

    Always yields Repository, Ref, Workflow, Event and Action. A sixth
    Number field links the issue or pull request the event is about.
    """
    repo_url = f"{GITHUB_URL}/{owner}/{repo}"
    workflow_url = _runs_query_url(repo_url, "workflow", workflow)
    event_url = _runs_query_url(repo_url, "event", event_name)
    run_url = f"{repo_url}/actions/runs/{run_id}"

    elements = [
        MrkdwnElement(text=f"*Repository:*\n<{repo_url}|{owner}/{repo}>"),
        MrkdwnElement(text=f"*Ref:*\n{ref}"),
        MrkdwnElement(text=f"*Workflow:*\n<{workflow_url}|{workflow}>"),
        MrkdwnElement(text=f"*Event:*\n<{event_url}|{event_name}>"),
        MrkdwnElement(text=f"*Action:*\n<{run_url}|Link>"),
    ]

    subject = classify_event(payload)
    if isinstance(subject, IssueSubject) and subject.number:
        number_url = f"{repo_url}/issues/{subject.number}"
    elif isinstance(subject, PullRequestSubject) and subject.number:
        number_url = f"{repo_url}/pull/{subject.number}"
    else:
        return elements

    elements.append(MrkdwnElement(text=f"*Number:*\n<{number_url}|{subject.number}>"))
    return elements
