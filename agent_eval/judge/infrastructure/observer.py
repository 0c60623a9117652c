"""StructlogJudgeObserver — one log line per judged aspect (diff or thread)."""

import structlog


class StructlogJudgeObserver:
    """Satisfies the JudgeObserver protocol; failures are logged at error level."""

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def judge_scoring_started(
        self, instance: str, round_index: int, aspect: str, model: str
    ) -> None:
        self._log.info(
            "judge.scoring_started",
            instance=instance,
            round_index=round_index,
            aspect=aspect,
            model=model,
        )

    def judge_scoring_completed(
        self, instance: str, round_index: int, aspect: str, score: int, duration_ms: int
    ) -> None:
        self._log.info(
            "judge.scoring_completed",
            instance=instance,
            round_index=round_index,
            aspect=aspect,
            score=score,
            duration_ms=duration_ms,
        )

    def judge_scoring_failed(
        self, instance: str, round_index: int, aspect: str, reason: str
    ) -> None:
        self._log.error(
            "judge.scoring_failed",
            instance=instance,
            round_index=round_index,
            aspect=aspect,
            reason=reason,
        )
