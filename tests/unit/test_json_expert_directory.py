from __future__ import annotations

import json
from pathlib import Path

import pytest

from expert_finder.application.ports.expert_directory_port import ExpertDirectoryError
from expert_finder.infrastructure.directory.json_expert_directory import JsonExpertDirectory


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "experts.json"
    path.write_text(content, encoding="utf-8")
    return path


def test_load_experts_preserves_file_order(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        json.dumps({"wealth_tech": "Asha Rao", "lending": "Ben Okafor", "bav": "Chen Li"}),
    )

    experts = JsonExpertDirectory(path).load_experts()

    assert list(experts) == ["wealth_tech", "lending", "bav"]
    assert experts["lending"] == "Ben Okafor"


def test_load_experts_rereads_file_on_every_call(tmp_path: Path) -> None:
    path = _write(tmp_path, json.dumps({"lending": "Ben Okafor"}))
    directory = JsonExpertDirectory(path)

    assert directory.load_experts() == {"lending": "Ben Okafor"}

    path.write_text(json.dumps({"poc": "Dana Smith"}), encoding="utf-8")

    assert directory.load_experts() == {"poc": "Dana Smith"}


def test_missing_file_raises_directory_error(tmp_path: Path) -> None:
    directory = JsonExpertDirectory(tmp_path / "absent.json")

    with pytest.raises(ExpertDirectoryError, match="cannot read"):
        directory.load_experts()


def test_invalid_json_raises_directory_error(tmp_path: Path) -> None:
    path = _write(tmp_path, "{not json")

    with pytest.raises(ExpertDirectoryError, match="invalid JSON"):
        JsonExpertDirectory(path).load_experts()


@pytest.mark.parametrize(
    "content",
    [
        "[]",
        '"lending"',
        '{"lending": 7}',
        '{"lending": null}',
        '{"lending": {"name": "Ben"}}',
    ],
)
def test_non_string_mapping_raises_directory_error(tmp_path: Path, content: str) -> None:
    path = _write(tmp_path, content)

    with pytest.raises(ExpertDirectoryError, match="must map string keys"):
        JsonExpertDirectory(path).load_experts()


def test_duplicate_raw_keys_raise_directory_error(tmp_path: Path) -> None:
    path = _write(tmp_path, '{"lending": "Ben", "lending": "Other"}')

    with pytest.raises(ExpertDirectoryError, match="duplicate"):
        JsonExpertDirectory(path).load_experts()


def test_duplicate_normalized_keys_raise_directory_error(tmp_path: Path) -> None:
    path = _write(tmp_path, json.dumps({"VKYC": "Ana", "vkyc ": "Other"}))

    with pytest.raises(ExpertDirectoryError, match="duplicate"):
        JsonExpertDirectory(path).load_experts()


def test_blank_key_raises_directory_error(tmp_path: Path) -> None:
    path = _write(tmp_path, json.dumps({"  ": "Nobody"}))

    with pytest.raises(ExpertDirectoryError, match="blank key"):
        JsonExpertDirectory(path).load_experts()


def test_bundled_directory_file_is_valid() -> None:
    experts = JsonExpertDirectory(Path(__file__).parents[2] / "experts.json").load_experts()

    assert "wealth_tech" in experts
    assert all(value.strip() for value in experts.values())
