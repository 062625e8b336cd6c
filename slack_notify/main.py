"""Entry point: post one Slack message describing the current workflow run."""

import asyncio
import logging
import os
import sys
from typing import Optional

import httpx

from slack_notify.channels.context import build_context_elements
from slack_notify.channels.slack import compose_message
from slack_notify.config import Settings
from slack_notify.dispatcher import post_message
from slack_notify.github import load_github_context

logger = logging.getLogger(__name__)


async def run(client: Optional[httpx.AsyncClient] = None) -> None:
    settings = Settings()
    custom_payload = settings.load_custom_payload()
    ctx = load_github_context()

    elements = build_context_elements(
        ctx.owner,
        ctx.repo,
        ctx.payload,
        ctx.ref,
        ctx.event_name,
        ctx.workflow,
        ctx.run_id,
    )

    request = compose_message(
        settings.channel,
        settings.message,
        settings.username,
        elements,
        settings.verbose,
        settings.color,
        settings.unfurl,
        custom_payload,
    )
    logger.debug(
        "Composed message for %s/%s run %s (blocks=%s, attachments=%s)",
        ctx.owner,
        ctx.repo,
        ctx.run_id,
        request.blocks is not None,
        request.attachments is not None,
    )

    await post_message(settings.slack_token, request, client=client)


def _escape_command_data(data: str) -> str:
    # '%' first, so the escapes added below are not re-escaped
    return data.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _set_failed(message: str) -> None:
    # Workflow command; the runner turns it into an error annotation
    print(f"::error::{_escape_command_data(message)}", flush=True)


def main() -> int:
    logging.basicConfig(
        level=logging.DEBUG if os.environ.get("RUNNER_DEBUG") == "1" else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        asyncio.run(run())
    except Exception as e:
        logger.error("Slack notification failed: %s", e, exc_info=True)
        _set_failed(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
