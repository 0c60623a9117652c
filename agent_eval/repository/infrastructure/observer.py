"""Structlog implementation of the RepositoryObserver port."""

import structlog


class StructlogRepositoryObserver:
    """Delegates repository domain events to structlog.

    Satisfies the RepositoryObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def repository_cloning(self, url: str, path: str) -> None:
        self._log.info("repository.cloning", url=url, path=path)

    def repository_already_cloned(self, url: str, path: str) -> None:
        self._log.info("repository.already_cloned", url=url, path=path)

    def repository_origin_mismatch(
        self, url: str, path: str, actual_origin: str
    ) -> None:
        self._log.error(
            "repository.origin_mismatch",
            url=url,
            path=path,
            actual_origin=actual_origin,
        )

    def repositories_ready(self, total: int) -> None:
        self._log.info("repository.ready", total=total)
