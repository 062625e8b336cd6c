"""Base types for Slack message formatting."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class MrkdwnElement:
    """A labeled text fragment rendered with Slack's mrkdwn dialect."""
    text: str
    type: str = "mrkdwn"

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type, "text": self.text}


@dataclass
class MessageRequest:
    """Arguments for a single chat.postMessage call."""
    channel: str
    text: str  # fallback text
    username: str
    link_names: bool = True
    unfurl_links: bool = True
    unfurl_media: bool = True
    blocks: Optional[list[dict[str, Any]]] = None
    attachments: Optional[list[dict[str, Any]]] = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "channel": self.channel,
            "text": self.text,
            "username": self.username,
            "link_names": self.link_names,
            "unfurl_links": self.unfurl_links,
            "unfurl_media": self.unfurl_media,
        }
        if self.blocks is not None:
            body["blocks"] = self.blocks
        if self.attachments is not None:
            body["attachments"] = self.attachments
        return body
