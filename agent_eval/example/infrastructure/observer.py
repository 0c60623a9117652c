"""Structlog implementation of the ExampleObserver port."""

import structlog


class StructlogExampleObserver:
    """Delegates example domain events to structlog.

    Satisfies the ExampleObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def examples_discovered(self, root: str, total: int, matched: int) -> None:
        self._log.info("example.discovered", root=root, total=total, matched=matched)

    def examples_skipped(self, names: list[str], allowed_languages: list[str]) -> None:
        self._log.info(
            "example.skipped",
            names=names,
            allowed_languages=allowed_languages,
        )

    def instance_scheduled(
        self, name: str, repetition_index: int, output_directory: str
    ) -> None:
        self._log.info(
            "example.instance_scheduled",
            name=name,
            repetition_index=repetition_index,
            output_directory=output_directory,
        )
