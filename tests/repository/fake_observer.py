"""FakeRepositoryObserver — records repository domain events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RepositoryEvent:
    url: str
    path: str


@dataclass(frozen=True)
class RepositoryMismatchEvent:
    url: str
    path: str
    actual_origin: str


class FakeRepositoryObserver:
    """Records all emitted repository events as typed frozen dataclasses."""

    def __init__(self) -> None:
        self.cloning: list[RepositoryEvent] = []
        self.already_cloned: list[RepositoryEvent] = []
        self.mismatches: list[RepositoryMismatchEvent] = []
        self.ready: list[int] = []

    def repository_cloning(self, url: str, path: str) -> None:
        self.cloning.append(RepositoryEvent(url=url, path=path))

    def repository_already_cloned(self, url: str, path: str) -> None:
        self.already_cloned.append(RepositoryEvent(url=url, path=path))

    def repository_origin_mismatch(
        self, url: str, path: str, actual_origin: str
    ) -> None:
        self.mismatches.append(
            RepositoryMismatchEvent(url=url, path=path, actual_origin=actual_origin)
        )

    def repositories_ready(self, total: int) -> None:
        self.ready.append(total)
