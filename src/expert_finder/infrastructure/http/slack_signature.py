"""Slack request signature verification (HMAC-SHA256, `v0` scheme)."""

from __future__ import annotations

import hashlib
import hmac
import time
from dataclasses import dataclass
from enum import StrEnum

SIGNATURE_VERSION = "v0"
DEFAULT_MAX_AGE_SECONDS = 300
_MAX_TIMESTAMP_DIGITS = 12


class SlackAuthRejectReason(StrEnum):
    """Machine-readable reasons for rejecting an inbound Slack request."""

    SIGNING_SECRET_MISSING = "signing_secret_missing"
    STALE_OR_MISSING_TIMESTAMP = "stale_or_missing_timestamp"
    SIGNATURE_MISMATCH = "signature_mismatch"


@dataclass(frozen=True)
class SlackAuthDecision:
    """Outcome of request authentication; `reason` is set only on reject."""

    accepted: bool
    reason: SlackAuthRejectReason | None = None

    @classmethod
    def accept(cls) -> SlackAuthDecision:
        return cls(accepted=True)

    @classmethod
    def reject(cls, reason: SlackAuthRejectReason) -> SlackAuthDecision:
        return cls(accepted=False, reason=reason)


def compute_slack_signature(*, secret: str | bytes, timestamp: str, body: bytes) -> str:
    """Compute `v0=<hex>` signature over `v0:<timestamp>:<raw body>`."""

    key = secret.encode("utf-8") if isinstance(secret, str) else secret
    base = f"{SIGNATURE_VERSION}:{timestamp}:".encode() + body
    digest = hmac.new(key, base, hashlib.sha256).hexdigest()
    return f"{SIGNATURE_VERSION}={digest}"


def authenticate_slack_request(
    *,
    body: bytes,
    timestamp_header: str | None,
    signature_header: str | None,
    secret: str | bytes | None,
    now: float | None = None,
    max_age_seconds: int = DEFAULT_MAX_AGE_SECONDS,
) -> SlackAuthDecision:
    """Validate timestamp freshness and signature of a raw inbound request."""

    if not secret:
        return SlackAuthDecision.reject(SlackAuthRejectReason.SIGNING_SECRET_MISSING)

    timestamp = _parse_timestamp(timestamp_header)
    current = time.time() if now is None else now
    if timestamp is None or abs(current - timestamp) > max_age_seconds:
        return SlackAuthDecision.reject(SlackAuthRejectReason.STALE_OR_MISSING_TIMESTAMP)

    if signature_header is None:
        return SlackAuthDecision.reject(SlackAuthRejectReason.SIGNATURE_MISMATCH)

    assert timestamp_header is not None
    expected = compute_slack_signature(
        secret=secret,
        timestamp=timestamp_header,
        body=body,
    ).encode("ascii")
    provided = signature_header.encode("utf-8")
    if len(expected) != len(provided) or not hmac.compare_digest(expected, provided):
        return SlackAuthDecision.reject(SlackAuthRejectReason.SIGNATURE_MISMATCH)

    return SlackAuthDecision.accept()


def _parse_timestamp(raw: str | None) -> int | None:
    if raw is None:
        return None
    value = raw.strip()
    if not value.isascii() or not value.isdigit() or len(value) > _MAX_TIMESTAMP_DIGITS:
        return None
    return int(value)
