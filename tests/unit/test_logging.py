from __future__ import annotations

import logging

import pytest

from expert_finder.infrastructure import logging as logging_module
from expert_finder.infrastructure.logging import configure_logging


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        ("debug", logging.DEBUG),
        (" WARNING ", logging.WARNING),
        ("", logging.INFO),
        ("loud", logging.INFO),
    ],
)
def test_configure_logging_resolves_level(
    monkeypatch: pytest.MonkeyPatch,
    level: str,
    expected: int,
) -> None:
    captured: dict[str, object] = {}

    def _fake_basic_config(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr(logging_module.logging, "basicConfig", _fake_basic_config)

    configure_logging(level=level)

    assert captured["level"] == expected
    assert captured["format"] == "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def test_non_numeric_logging_attribute_falls_back_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}
    monkeypatch.setattr(
        logging_module.logging,
        "basicConfig",
        lambda **kwargs: captured.update(kwargs),
    )

    configure_logging(level="basic_format")

    assert captured["level"] == logging.INFO
