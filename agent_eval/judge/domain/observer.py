"""Observer port for the judge domain — defines events in domain language."""

from typing import Protocol


class JudgeObserver(Protocol):
    def judge_scoring_started(
        self, instance: str, round_index: int, aspect: str, model: str
    ) -> None: ...

    def judge_scoring_completed(
        self, instance: str, round_index: int, aspect: str, score: int, duration_ms: int
    ) -> None: ...

    def judge_scoring_failed(
        self, instance: str, round_index: int, aspect: str, reason: str
    ) -> None: ...
