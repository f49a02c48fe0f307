"""Parser for URL-encoded Slack slash-command request bodies."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import parse_qsl


@dataclass(frozen=True)
class SlashCommandPayload:
    """Slash-command fields used by the expert lookup route."""

    text: str
    command: str | None = None
    user_id: str | None = None
    user_name: str | None = None
    team_id: str | None = None
    channel_id: str | None = None
    response_url: str | None = None


@dataclass(frozen=True)
class SlashCommandParseError(ValueError):
    """Deterministic parse failure with machine-readable reason."""

    reason: str

    def __str__(self) -> str:
        return self.reason


def parse_slash_command(raw_body: bytes) -> SlashCommandPayload:
    """Decode a form-encoded slash-command body into a typed payload."""

    try:
        decoded = raw_body.decode("utf-8")
    except UnicodeDecodeError as error:
        raise SlashCommandParseError("invalid_encoding") from error

    segments = [segment for segment in decoded.split("&") if segment]
    try:
        pairs = parse_qsl(
            "&".join(segments),
            keep_blank_values=True,
            strict_parsing=bool(segments),
        )
    except ValueError as error:
        raise SlashCommandParseError("malformed_body") from error

    fields: dict[str, str] = {}
    for key, value in pairs:
        fields.setdefault(key, value)

    return SlashCommandPayload(
        text=fields.get("text", ""),
        command=fields.get("command"),
        user_id=fields.get("user_id"),
        user_name=fields.get("user_name"),
        team_id=fields.get("team_id"),
        channel_id=fields.get("channel_id"),
        response_url=fields.get("response_url"),
    )
