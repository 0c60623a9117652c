"""Persistent installation id, created on first use."""

import uuid
from pathlib import Path

INSTALLATION_ID_FILENAME = "installation_id"


def get_or_create_id(path: Path) -> str:
    """Return the id stored at path, writing a new UUID4 there if none exists.

    Raises:
        OSError: if the file cannot be read or created.
    """
    if path.is_file():
        existing = path.read_text(encoding="utf-8").strip()
        if existing:
            return existing
    new_id = str(uuid.uuid4())
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(new_id + "\n", encoding="utf-8")
    return new_id
