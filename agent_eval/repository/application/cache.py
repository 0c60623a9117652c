"""RepositoryCache — one prepare-or-verify per distinct repository URL."""

import asyncio
from collections.abc import Sequence
from pathlib import Path

from agent_eval.core.errors import AgentEvalError
from agent_eval.example.domain.instance import ScheduledInstance
from agent_eval.repository.domain.observer import RepositoryObserver
from agent_eval.repository.domain.repository import (
    RepositoryDescriptor,
    repository_directory_name,
)
from agent_eval.repository.domain.store import RepositoryStore
from agent_eval.repository.infrastructure.errors import RepositoryMismatchError


class RepositoryCache:
    """Deduplicates repository preparation across instances sharing a URL.

    ``prepare`` returns only after every distinct URL has been initialised or
    verified, so no two operations ever touch the same cache directory and no
    setup work starts against a half-initialised repository.
    """

    def __init__(
        self,
        root: Path,
        store: RepositoryStore,
        observer: RepositoryObserver,
    ) -> None:
        self._root = root
        self._store = store
        self._observer = observer

    def path_for(self, url: str) -> Path:
        return self._root / repository_directory_name(url)

    async def prepare(
        self, instances: Sequence[ScheduledInstance]
    ) -> list[RepositoryDescriptor]:
        """Prepare or verify each distinct repository URL concurrently.

        Raises:
            RepositoryMismatchError: if a cached repository points at another origin.
            AgentEvalError: the first failure of any preparation; the rest are cancelled.
        """
        descriptors: dict[str, RepositoryDescriptor] = {}
        for instance in instances:
            url = instance.example.base.url
            if url not in descriptors:
                descriptors[url] = RepositoryDescriptor(url=url, path=self.path_for(url))

        try:
            async with asyncio.TaskGroup() as tg:
                for descriptor in descriptors.values():
                    tg.create_task(self._prepare_or_verify(descriptor=descriptor))
        except* AgentEvalError as eg:
            raise eg.exceptions[0]

        self._observer.repositories_ready(total=len(descriptors))
        return list(descriptors.values())

    async def _prepare_or_verify(self, descriptor: RepositoryDescriptor) -> None:
        url, path = descriptor.url, descriptor.path
        actual_origin = None
        if self._store.is_prepared(path=path):
            actual_origin = await self._store.origin(path=path)
        if actual_origin is None:
            self._observer.repository_cloning(url=url, path=str(path))
            await self._store.prepare(url=url, path=path)
            return

        self._observer.repository_already_cloned(url=url, path=str(path))
        if actual_origin != url:
            self._observer.repository_origin_mismatch(
                url=url, path=str(path), actual_origin=actual_origin
            )
            raise RepositoryMismatchError(path=path, expected=url, actual=actual_origin)
