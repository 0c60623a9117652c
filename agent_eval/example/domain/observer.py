"""Observer port for the example domain — defines events in domain language."""

from typing import Protocol


class ExampleObserver(Protocol):
    def examples_discovered(self, root: str, total: int, matched: int) -> None: ...

    def examples_skipped(self, names: list[str], allowed_languages: list[str]) -> None: ...

    def instance_scheduled(
        self, name: str, repetition_index: int, output_directory: str
    ) -> None: ...
