"""LiteLLMJudge — judge implementation using LiteLLM for structured scoring."""

import time
from pathlib import Path

import litellm

from agent_eval.agent.domain.result import RunOutput
from agent_eval.example.domain.instance import ScheduledInstance
from agent_eval.judge.domain.observer import JudgeObserver
from agent_eval.judge.domain.score import MAX_SCORE, MIN_SCORE, JudgeOutput, JudgeScore
from agent_eval.judge.infrastructure.errors import JudgeInvocationError

_DIFF_SYSTEM_PROMPT = f"""\
You are an expert code reviewer grading the changes an AI coding agent made to a \
repository. You are given the task the agent was asked to perform, grading \
criteria, and the unified diff the agent produced.

Analyze the diff hunk by hunk against the criteria. Then give an integer score \
from {MIN_SCORE} to {MAX_SCORE}, where {MIN_SCORE} means none of the criteria are \
met (or the diff is empty) and {MAX_SCORE} means every criterion is fully met \
with no unrelated or harmful changes.

Respond with a JSON object containing:
- analysis: your hunk-by-hunk analysis against the criteria
- score: integer score ({MIN_SCORE}-{MAX_SCORE})
"""

_THREAD_SYSTEM_PROMPT = f"""\
You are an expert reviewer grading how an AI coding agent worked through a task. \
You are given the task, grading criteria, and the transcript of the agent's \
messages and tool calls.

Judge the agent's process against the criteria: its tool use, its reasoning, and \
how it communicated. Then give an integer score from {MIN_SCORE} to {MAX_SCORE}, \
where {MIN_SCORE} means none of the criteria are met and {MAX_SCORE} means every \
criterion is fully met.

Respond with a JSON object containing:
- analysis: your analysis of the transcript against the criteria
- score: integer score ({MIN_SCORE}-{MAX_SCORE})
"""


class LiteLLMJudge:
    """Judge implementation that delegates to an LLM via LiteLLM.

    The diff is always judged. The thread is judged only when the example
    defines thread criteria. Each aspect's analysis is written next to the
    run's other artifacts as ``<round>.<aspect>_judge.md``.
    """

    def __init__(self, model: str, temperature: float, observer: JudgeObserver) -> None:
        litellm.suppress_debug_info = True
        self._model = model
        self._temperature = temperature
        self._observer = observer

    async def judge(
        self, instance: ScheduledInstance, run_output: RunOutput, round_index: int
    ) -> JudgeOutput:
        """Score the run's diff (and thread, if criteria exist) for one round.

        Raises:
            JudgeInvocationError: if an LLM call fails or its response cannot be
                parsed into a JudgeScore.
        """
        example = instance.example
        diff = await self._score(
            instance=instance,
            round_index=round_index,
            aspect="diff",
            system_prompt=_DIFF_SYSTEM_PROMPT,
            user_message=(
                f"## Task\n{example.prompt}\n\n"
                f"## Criteria\n{example.diff_criteria}\n\n"
                f"## Diff\n```diff\n{run_output.repository_diff}\n```"
            ),
        )

        thread: JudgeScore | None = None
        if example.thread_criteria is not None:
            thread = await self._score(
                instance=instance,
                round_index=round_index,
                aspect="thread",
                system_prompt=_THREAD_SYSTEM_PROMPT,
                user_message=(
                    f"## Task\n{example.prompt}\n\n"
                    f"## Criteria\n{example.thread_criteria}\n\n"
                    f"## Transcript\n{run_output.thread_markdown}"
                ),
            )

        return JudgeOutput(diff=diff, thread=thread)

    async def _score(
        self,
        instance: ScheduledInstance,
        round_index: int,
        aspect: str,
        system_prompt: str,
        user_message: str,
    ) -> JudgeScore:
        self._observer.judge_scoring_started(
            instance=instance.name,
            round_index=round_index,
            aspect=aspect,
            model=self._model,
        )

        start = time.monotonic()
        try:
            response = await litellm.acompletion(
                model=self._model,
                temperature=self._temperature,
                response_format=JudgeScore,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_message},
                ],
            )
        except Exception as exc:
            reason = str(exc)
            self._observer.judge_scoring_failed(
                instance=instance.name,
                round_index=round_index,
                aspect=aspect,
                reason=reason,
            )
            raise JudgeInvocationError(reason=reason) from exc

        duration_ms = int((time.monotonic() - start) * 1000)

        raw_content: str = response.choices[0].message.content
        try:
            score = JudgeScore.model_validate_json(raw_content)
        except Exception as exc:
            reason = f"Failed to parse judge response: {exc}"
            self._observer.judge_scoring_failed(
                instance=instance.name,
                round_index=round_index,
                aspect=aspect,
                reason=reason,
            )
            raise JudgeInvocationError(reason=reason) from exc

        self._write_transcript(
            path=instance.output_directory / f"{round_index}.{aspect}_judge.md",
            score=score,
        )
        self._observer.judge_scoring_completed(
            instance=instance.name,
            round_index=round_index,
            aspect=aspect,
            score=score.score,
            duration_ms=duration_ms,
        )
        return score

    def _write_transcript(self, path: Path, score: JudgeScore) -> None:
        try:
            path.write_text(
                f"{score.analysis}\n\nScore: {score.score}\n", encoding="utf-8"
            )
        except OSError as exc:
            raise JudgeInvocationError(
                reason=f"cannot write judge transcript {path}: {exc}"
            ) from exc
