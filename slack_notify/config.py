from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings

from slack_notify.channels.slack import resolve_color
from slack_notify.schemas import CustomPayload


class Settings(BaseSettings):
    """Action inputs, exported by the runner as INPUT_<NAME>."""

    slack_token: str = ""
    channel: str = ""
    message: str
    username: str = ""
    color: str = ""

    # Only the literal strings "true" / "false" flip these from their defaults
    verbose: bool = False
    unfurl: bool = True

    # Empty, or a JSON document shaped like {"blocks": [...]}
    custom_payload: str = ""

    model_config = {"env_prefix": "INPUT_", "extra": "ignore"}

    # Every input is trimmed before any other normalisation

    @field_validator("slack_token", "message", "username", "custom_payload", mode="before")
    @classmethod
    def strip_whitespace(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("channel", mode="before")
    @classmethod
    def strip_channel_prefix(cls, value):
        if isinstance(value, str):
            value = value.strip()
            if value.startswith("#"):
                return value[1:]
        return value

    @field_validator("color", mode="before")
    @classmethod
    def resolve_named_color(cls, value):
        if isinstance(value, str):
            return resolve_color(value.strip())
        return value

    @field_validator("verbose", mode="before")
    @classmethod
    def parse_verbose(cls, value):
        if isinstance(value, str):
            return value.strip() == "true"
        return value

    @field_validator("unfurl", mode="before")
    @classmethod
    def parse_unfurl(cls, value):
        if isinstance(value, str):
            return value.strip() != "false"
        return value

    def load_custom_payload(self) -> Optional[CustomPayload]:
        """Parse ``custom_payload``; raises ValidationError on malformed JSON."""
        if self.custom_payload == "":
            return None
        return CustomPayload.model_validate_json(self.custom_payload)
