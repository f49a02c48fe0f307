"""bot-api entrypoint and HTTP route wiring."""

from __future__ import annotations

import logging
from collections.abc import Callable

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from expert_finder.application.services.expert_lookup_service import ExpertLookupService
from expert_finder.config.settings import Settings, load_settings
from expert_finder.infrastructure.directory.json_expert_directory import JsonExpertDirectory
from expert_finder.infrastructure.http.slack_signature import authenticate_slack_request
from expert_finder.infrastructure.http.slash_command_parser import (
    SlashCommandParseError,
    parse_slash_command,
)
from expert_finder.infrastructure.logging import configure_logging
from expert_finder.infrastructure.slack.message_templates import build_outcome_message

BOT_API_HOST = "0.0.0.0"
INVALID_REQUEST_DETAIL = "invalid request"
logger = logging.getLogger(__name__)


def build_lookup_service(settings: Settings) -> ExpertLookupService:
    """Build expert lookup service backed by the configured JSON directory."""

    return ExpertLookupService(
        directory=JsonExpertDirectory(settings.experts_file),
        threshold=settings.match_threshold,
    )


def create_app(
    *,
    signing_secret: str | None = None,
    lookup_service: ExpertLookupService | None = None,
    signature_max_age_seconds: int | None = None,
    clock: Callable[[], float] | None = None,
) -> FastAPI:
    """Create FastAPI app serving the `/expert` slash command."""

    if lookup_service is None or signing_secret is None or signature_max_age_seconds is None:
        settings = load_settings()
        configure_logging(level=settings.log_level)
        if signing_secret is None:
            signing_secret = settings.slack_signing_secret
        if lookup_service is None:
            lookup_service = build_lookup_service(settings)
        if signature_max_age_seconds is None:
            signature_max_age_seconds = settings.signature_max_age_seconds

    if not signing_secret:
        logger.warning("slack_signing_secret_missing all requests will be rejected")

    assert lookup_service is not None
    assert signature_max_age_seconds is not None

    app = FastAPI()

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/expert", response_class=PlainTextResponse)
    async def expert_command(request: Request) -> PlainTextResponse:
        raw_body = await request.body()

        decision = authenticate_slack_request(
            body=raw_body,
            timestamp_header=request.headers.get("x-slack-request-timestamp"),
            signature_header=request.headers.get("x-slack-signature"),
            secret=signing_secret,
            now=clock() if clock is not None else None,
            max_age_seconds=signature_max_age_seconds,
        )
        if not decision.accepted:
            logger.warning("slack_request_rejected reason=%s", decision.reason)
            return PlainTextResponse(INVALID_REQUEST_DETAIL, status_code=400)

        try:
            payload = parse_slash_command(raw_body)
        except SlashCommandParseError as error:
            logger.warning("slack_request_unparseable reason=%s", error.reason)
            return PlainTextResponse(INVALID_REQUEST_DETAIL, status_code=400)

        logger.info(
            "slack_expert_command_received user_id=%s channel_id=%s",
            payload.user_id,
            payload.channel_id,
        )
        result = lookup_service.lookup(payload.text)
        logger.info("slack_expert_command_result outcome=%s", result.outcome.value)

        return PlainTextResponse(build_outcome_message(result))

    return app


def run_asgi_server(*, host: str = BOT_API_HOST, port: int | None = None) -> None:
    """Run bot-api as a long-lived ASGI process using application factory mode."""

    if port is None:
        port = load_settings().port
    logger.info("bot_api_listening host=%s port=%s", host, port)
    uvicorn.run(
        "apps.bot_api.main:create_app",
        host=host,
        port=port,
        factory=True,
    )


def main() -> None:
    """Run bot-api runtime process."""

    run_asgi_server()


if __name__ == "__main__":
    main()
