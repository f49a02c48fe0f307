"""JSON file adapter for the domain-to-expert directory."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from expert_finder.application.ports.expert_directory_port import (
    ExpertDirectoryError,
    ExpertDirectoryPort,
)

_DIRECTORY_ADAPTER = TypeAdapter(dict[str, str])


class JsonExpertDirectory(ExpertDirectoryPort):
    """Read `{"domain_key": "expert"}` JSON from disk on every call."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load_experts(self) -> dict[str, str]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as error:
            raise ExpertDirectoryError(f"cannot read expert directory {self._path}") from error

        try:
            decoded = json.loads(raw, object_pairs_hook=_reject_duplicate_keys)
        except json.JSONDecodeError as error:
            raise ExpertDirectoryError(f"invalid JSON in expert directory {self._path}") from error

        try:
            experts = _DIRECTORY_ADAPTER.validate_python(decoded, strict=True)
        except ValidationError as error:
            raise ExpertDirectoryError(
                f"expert directory {self._path} must map string keys to strings"
            ) from error

        _validate_keys(experts)
        return experts


def _reject_duplicate_keys(pairs: list[tuple[str, object]]) -> dict[str, object]:
    decoded: dict[str, object] = {}
    for key, value in pairs:
        if key in decoded:
            raise ExpertDirectoryError(f"duplicate expert directory key {key!r}")
        decoded[key] = value
    return decoded


def _validate_keys(experts: dict[str, str]) -> None:
    seen: set[str] = set()
    for key in experts:
        normalized = key.strip().lower()
        if not normalized:
            raise ExpertDirectoryError("expert directory contains a blank key")
        if normalized in seen:
            raise ExpertDirectoryError(f"duplicate expert directory key {key!r}")
        seen.add(normalized)
