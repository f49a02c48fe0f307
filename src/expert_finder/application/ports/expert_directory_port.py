"""Port for reading the domain-to-expert directory."""

from __future__ import annotations

from typing import Protocol


class ExpertDirectoryError(RuntimeError):
    """Raised when the expert directory cannot be read or is malformed."""


class ExpertDirectoryPort(Protocol):
    """Expert directory read contract."""

    def load_experts(self) -> dict[str, str]:
        """Return domain keys mapped to expert text, in directory order."""
