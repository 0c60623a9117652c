"""RepositoryStore Protocol — the operations the repository cache needs from git."""

from pathlib import Path
from typing import Protocol


class RepositoryStore(Protocol):
    """Prepares and inspects local repository clones."""

    def is_prepared(self, path: Path) -> bool: ...

    async def prepare(self, url: str, path: Path) -> None:
        """Initialise an empty repository at path with url registered as origin."""
        ...

    async def origin(self, path: Path) -> str | None:
        """Return the URL registered as origin, or None if no origin is registered.

        None marks a repository whose preparation was interrupted before the
        origin was added; preparing it again completes it.
        """
        ...
