"""FakeRepositoryStore and FakeInstancePreparer — in-memory repository ports for tests."""

import asyncio
from pathlib import Path

from agent_eval.core.errors import AgentEvalError
from agent_eval.example.domain.instance import ScheduledInstance


class FakeRepositoryStore:
    """Satisfies the RepositoryStore protocol.

    ``origins`` maps already-prepared cache paths to their recorded origin URL,
    or to None for a repository initialised without an origin.
    Every ``prepare`` call is recorded, and the peak number of overlapping
    ``prepare``/``origin`` calls is tracked in ``max_in_flight``.
    """

    def __init__(
        self,
        origins: dict[Path, str | None] | None = None,
        fail_urls: set[str] | None = None,
        delay_seconds: float = 0.0,
    ) -> None:
        self._origins: dict[Path, str | None] = dict(origins or {})
        self._fail_urls = fail_urls or set()
        self._delay_seconds = delay_seconds
        self._in_flight = 0
        self.max_in_flight = 0
        self.prepared: list[tuple[str, Path]] = []
        self.verified: list[Path] = []

    def is_prepared(self, path: Path) -> bool:
        return path in self._origins

    async def prepare(self, url: str, path: Path) -> None:
        self._enter()
        try:
            await asyncio.sleep(self._delay_seconds)
            if url in self._fail_urls:
                raise AgentEvalError(f"Failed to prepare {url}")
            self.prepared.append((url, path))
            self._origins[path] = url
        finally:
            self._in_flight -= 1

    async def origin(self, path: Path) -> str | None:
        self._enter()
        try:
            await asyncio.sleep(self._delay_seconds)
            self.verified.append(path)
            return self._origins[path]
        finally:
            self._in_flight -= 1

    def _enter(self) -> None:
        self._in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self._in_flight)


class FakeInstancePreparer:
    """Satisfies the InstancePreparer protocol, recording setup order and overlap."""

    def __init__(
        self,
        fail_instances: set[str] | None = None,
        delay_seconds: float = 0.0,
    ) -> None:
        self._fail_instances = fail_instances or set()
        self._delay_seconds = delay_seconds
        self._in_flight = 0
        self.max_in_flight = 0
        self.setup_order: list[str] = []

    async def setup(self, instance: ScheduledInstance) -> None:
        self._in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self._in_flight)
        try:
            await asyncio.sleep(self._delay_seconds)
            if instance.name in self._fail_instances:
                raise AgentEvalError(f"Failed to set up instance {instance.name}")
            self.setup_order.append(instance.name)
        finally:
            self._in_flight -= 1
