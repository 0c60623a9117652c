"""Tests for the persistent installation id."""

import uuid
from pathlib import Path

from agent_eval.telemetry.infrastructure.ids import get_or_create_id


def test_creates_uuid_on_first_use(tmp_path: Path) -> None:
    path = tmp_path / "state" / "installation_id"

    created = get_or_create_id(path=path)

    assert uuid.UUID(created).version == 4
    assert path.read_text().strip() == created


def test_returns_same_id_on_later_calls(tmp_path: Path) -> None:
    path = tmp_path / "installation_id"

    assert get_or_create_id(path=path) == get_or_create_id(path=path)


def test_blank_file_is_replaced(tmp_path: Path) -> None:
    path = tmp_path / "installation_id"
    path.write_text("\n")

    created = get_or_create_id(path=path)

    assert created
    assert path.read_text().strip() == created
