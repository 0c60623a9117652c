"""StructlogConfigObserver — logs config loading to structlog."""

import structlog


class StructlogConfigObserver:
    """Satisfies the ConfigObserver protocol structurally."""

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(
        self, path: str, model: str, judge_model: str, languages: list[str]
    ) -> None:
        self._log.info(
            "config.loaded",
            path=path,
            model=model,
            judge_model=judge_model,
            languages=languages,
        )

    def config_judge_temperature_warning(
        self, temperature: float, judge_repetitions: int
    ) -> None:
        # Repeated rounds only agree with each other at temperature 0.
        self._log.warning(
            "config.judge_temperature_nonzero",
            temperature=temperature,
            judge_repetitions=judge_repetitions,
        )
