"""Observer port for the repository domain — defines events in domain language."""

from typing import Protocol


class RepositoryObserver(Protocol):
    def repository_cloning(self, url: str, path: str) -> None: ...

    def repository_already_cloned(self, url: str, path: str) -> None: ...

    def repository_origin_mismatch(
        self, url: str, path: str, actual_origin: str
    ) -> None: ...

    def repositories_ready(self, total: int) -> None: ...
