"""Tests for slack_notify.channels.context.build_context_elements."""

from slack_notify.channels import MrkdwnElement
from slack_notify.channels.context import build_context_elements

REPO_URL = "https://github.com/octo/widgets"


def _build(payload=None, workflow="CI", event_name="push", run_id="42"):
    return build_context_elements(
        "octo",
        "widgets",
        {} if payload is None else payload,
        "refs/heads/main",
        event_name,
        workflow,
        run_id,
    )


# ---------------------------------------------------------------------------
# Fixed elements
# ---------------------------------------------------------------------------


def test_five_elements_without_issue_or_pull_request():
    elements = _build()
    assert len(elements) == 5
    assert all(isinstance(e, MrkdwnElement) for e in elements)
    assert all(e.type == "mrkdwn" for e in elements)


def test_elements_in_display_order():
    labels = [e.text.split("\n")[0] for e in _build()]
    assert labels == ["*Repository:*", "*Ref:*", "*Workflow:*", "*Event:*", "*Action:*"]


def test_repository_link_is_verbatim():
    assert _build()[0].text == f"*Repository:*\n<{REPO_URL}|octo/widgets>"


def test_ref_is_plain_text():
    assert _build()[1].text == "*Ref:*\nrefs/heads/main"


def test_workflow_name_is_percent_encoded():
    element = _build(workflow="Build & Test")[2]
    assert element.text == (
        f"*Workflow:*\n<{REPO_URL}/actions?query=workflow%3A%22Build%20%26%20Test%22|Build & Test>"
    )


def test_event_name_is_percent_encoded():
    element = _build(event_name="pull_request")[3]
    assert element.text == (
        f"*Event:*\n<{REPO_URL}/actions?query=event%3A%22pull_request%22|pull_request>"
    )


def test_run_link():
    assert _build(run_id="123456")[4].text == f"*Action:*\n<{REPO_URL}/actions/runs/123456|Link>"


def test_empty_run_id_still_links_to_runs():
    assert _build(run_id="")[4].text == f"*Action:*\n<{REPO_URL}/actions/runs/|Link>"


# ---------------------------------------------------------------------------
# Issue / pull request number
# ---------------------------------------------------------------------------


def test_issue_adds_number_element():
    elements = _build({"issue": {"number": 7}})
    assert len(elements) == 6
    assert elements[5].text == f"*Number:*\n<{REPO_URL}/issues/7|7>"


def test_pull_request_adds_number_element():
    elements = _build({"pull_request": {"number": 12}})
    assert len(elements) == 6
    assert elements[5].text == f"*Number:*\n<{REPO_URL}/pull/12|12>"


def test_pull_request_wins_when_both_present():
    # Real payloads never carry both; the later pull request check overrides.
    elements = _build({"issue": {"number": 7}, "pull_request": {"number": 12}})
    assert len(elements) == 6
    assert elements[5].text == f"*Number:*\n<{REPO_URL}/pull/12|12>"


def test_null_issue_is_ignored():
    assert len(_build({"issue": None})) == 5


def test_non_object_pull_request_is_ignored():
    assert len(_build({"pull_request": "12"})) == 5


def test_non_dict_payload_is_ignored():
    assert len(_build(payload=["issue"])) == 5


def test_missing_number_skips_element():
    assert len(_build({"issue": {"title": "no number"}})) == 5
