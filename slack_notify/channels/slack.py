"""Slack message composer."""

import re
from types import MappingProxyType
from typing import Callable, Optional

from slack_notify.channels import MessageRequest, MrkdwnElement
from slack_notify.schemas import CustomPayload

COLOR_CODES = MappingProxyType({
    "black": "#000000",
    "red": "#F44336",
    "green": "#4CAF50",
    "yellow": "#FFEB3B",
    "blue": "#2196F3",
    "magenta": "#FF00FF",
    "cyan": "#00BCD4",
    "white": "#FFFFFF",
})

_HEX_COLOR = re.compile(r"#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})")


def resolve_color(value: str) -> str:
    """Map a named color to its hex code; anything else is returned as-is."""
    return COLOR_CODES.get(value) or value


def is_hex_color(value: str) -> bool:
    return _HEX_COLOR.fullmatch(value) is not None


# --- Layouts, one per (colored, verbose) combination ---


def _plain(request: MessageRequest, fields: list[dict], color: str) -> None:
    pass


def _blocks(request: MessageRequest, fields: list[dict], color: str) -> None:
    request.blocks = [
        {
            "type": "section",
            "text": {"type": "mrkdwn", "text": request.text},
            "fields": fields,
        }
    ]
    request.text = ""


def _colored_text(request: MessageRequest, fields: list[dict], color: str) -> None:
    request.attachments = [{"color": color, "text": request.text}]
    request.text = ""


def _colored_blocks(request: MessageRequest, fields: list[dict], color: str) -> None:
    request.attachments = [
        {
            "color": color,
            "blocks": [{"type": "section", "fields": fields}],
        }
    ]


# Slack only draws a colored bar on attachments, so the colored layouts nest
# their content one level down.
_LAYOUTS: dict[tuple[bool, bool], Callable[[MessageRequest, list[dict], str], None]] = {
    (False, False): _plain,
    (False, True): _blocks,
    (True, False): _colored_text,
    (True, True): _colored_blocks,
}


def compose_message(
    channel: str,
    message: str,
    username: str,
    elements: list[MrkdwnElement],
    verbose: bool,
    color: str,
    unfurl: bool,
    custom_payload: Optional[CustomPayload] = None,
) -> MessageRequest:
    """
    Build the chat.postMessage arguments for a run notification.

    A custom payload replaces all generated content. Otherwise the layout
    depends on whether ``color`` is a hex color and on ``verbose``:

        colored &&  verbose -> .text, .attachments[].{color, blocks}
       !colored &&  verbose -> .blocks[]
        colored && !verbose -> .attachments[].{color, text}
       !colored && !verbose -> .text
    """
    request = MessageRequest(
        channel=channel,
        text=message,
        username=username,
        link_names=True,
        unfurl_links=unfurl,
        unfurl_media=unfurl,
    )

    if custom_payload is not None:
        request.blocks = custom_payload.blocks
        return request

    colored = is_hex_color(color)
    layout = _LAYOUTS[(colored, bool(verbose))]
    layout(request, [element.to_dict() for element in elements], color)
    return request
