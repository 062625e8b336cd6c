"""Delivery of a composed message through the Slack Web API."""

import logging
from typing import Optional

import httpx

from slack_notify.channels import MessageRequest

logger = logging.getLogger(__name__)

SLACK_POST_MESSAGE_URL = "https://slack.com/api/chat.postMessage"


class SlackApiError(RuntimeError):
    """Slack rejected the request (HTTP error status or ``ok: false``)."""

    def __init__(self, error: str, status_code: int):
        super().__init__(f"Slack chat.postMessage failed: {error} (HTTP {status_code})")
        self.error = error
        self.status_code = status_code


async def post_message(
    token: str,
    request: MessageRequest,
    client: Optional[httpx.AsyncClient] = None,
) -> dict:
    """
    Send ``request`` with chat.postMessage and return Slack's response body.

    Args:
        token: Bot or user OAuth token
        request: Composed message arguments
        client: Optional client to reuse; a short-lived one is created otherwise
    """
    if client is None:
        async with httpx.AsyncClient(timeout=15) as owned_client:
            return await _post(owned_client, token, request)
    return await _post(client, token, request)


async def _post(client: httpx.AsyncClient, token: str, request: MessageRequest) -> dict:
    resp = await client.post(
        SLACK_POST_MESSAGE_URL,
        headers={
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json; charset=utf-8",
        },
        json=request.to_dict(),
    )

    if resp.status_code >= 400:
        raise SlackApiError(resp.text[:200] or resp.reason_phrase, resp.status_code)

    body = resp.json()
    if not body.get("ok"):
        raise SlackApiError(body.get("error", "unknown_error"), resp.status_code)

    logger.info("Message posted to channel=%s ts=%s", body.get("channel"), body.get("ts"))
    return body
