"""ClaudeAgentSDKAgent — agent implementation using the Claude Agent SDK."""

import json
from pathlib import Path
from typing import Any

from claude_agent_sdk import (
    AssistantMessage,
    ClaudeAgentOptions,
    ClaudeSDKError,
    ResultMessage,
    TextBlock,
    ToolResultBlock,
    ToolUseBlock,
    UserMessage,
    query,
)

from agent_eval.agent.domain.observer import AgentObserver
from agent_eval.agent.domain.result import RunOutput
from agent_eval.agent.domain.tool_metrics import ToolMetrics
from agent_eval.agent.domain.usage import TokenUsage
from agent_eval.agent.infrastructure.diagnostics import DiagnosticsChecker
from agent_eval.agent.infrastructure.errors import (
    AgentInvocationError,
    DiagnosticsError,
)
from agent_eval.config.domain.agent import AgentConfig
from agent_eval.example.domain.instance import ScheduledInstance
from agent_eval.model.domain.model import ResolvedModel
from agent_eval.repository.infrastructure.errors import GitCommandError
from agent_eval.repository.infrastructure.git_cli import run_git

THREAD_FILENAME = "thread.md"
DIFF_FILENAME = "repository.diff"


class ClaudeAgentSDKAgent:
    """Agent implementation that delegates to the Claude Agent SDK.

    Each run opens a fresh SDK session with the instance worktree as its
    working directory, so concurrent runs never share agent state.
    """

    def __init__(
        self,
        config: AgentConfig,
        diagnostics: DiagnosticsChecker,
        observer: AgentObserver,
    ) -> None:
        self._config = config
        self._diagnostics = diagnostics
        self._observer = observer

    async def run(self, instance: ScheduledInstance, model: ResolvedModel) -> RunOutput:
        """Run the agent on the instance prompt and return the structured outcome.

        Raises:
            AgentInvocationError: if the SDK raises, the agent reports an error,
                or the resulting diff cannot be captured.
            DiagnosticsError: if the diagnostics command cannot be started.
        """
        worktree = instance.worktree_directory
        language = instance.example.language
        self._observer.agent_run_started(
            instance=instance.name, model=model.id, worktree=str(worktree)
        )

        options = ClaudeAgentOptions(
            model=model.id,
            cwd=worktree,
            system_prompt=self._config.system_prompt,
            max_turns=self._config.max_turns,
            permission_mode="bypassPermissions",
            setting_sources=[],
        )
        try:
            diagnostics_before = await self._diagnostics.count(
                worktree=worktree, language=language
            )
            self._observer.agent_diagnostics_counted(
                instance=instance.name, phase="before", count=diagnostics_before
            )
            recorder = await self._collect_thread(
                instance=instance, prompt=instance.example.prompt, options=options
            )
            repository_diff = await self._capture_diff(worktree=worktree)
            diagnostics_after = await self._diagnostics.count(
                worktree=worktree, language=language
            )
            self._observer.agent_diagnostics_counted(
                instance=instance.name, phase="after", count=diagnostics_after
            )
            thread_markdown = recorder.markdown()
            self._write_artifacts(
                output_directory=instance.output_directory,
                thread_markdown=thread_markdown,
                repository_diff=repository_diff,
            )
        except (AgentInvocationError, DiagnosticsError) as exc:
            reason = str(exc).removeprefix("Failed to invoke agent: ")
            self._observer.agent_run_failed(instance=instance.name, reason=reason)
            raise

        output = RunOutput(
            repository_diff=repository_diff,
            thread_markdown=thread_markdown,
            response_count=recorder.response_count,
            token_usage=recorder.token_usage(),
            tool_metrics=ToolMetrics.from_calls(recorder.tool_calls),
            diagnostics_before=diagnostics_before,
            diagnostics_after=diagnostics_after,
        )
        self._observer.agent_run_completed(
            instance=instance.name,
            response_count=output.response_count,
            total_tokens=output.token_usage.total_tokens,
            cost_usd=recorder.cost_usd(),
        )
        return output

    async def _collect_thread(
        self, instance: ScheduledInstance, prompt: str, options: ClaudeAgentOptions
    ) -> "_ThreadRecorder":
        """Stream the SDK session into a _ThreadRecorder.

        Raises:
            AgentInvocationError: on SDK errors or a missing/error ResultMessage.
        """
        recorder = _ThreadRecorder(prompt=prompt)
        try:
            async for message in query(prompt=prompt, options=options):
                for tool_name, succeeded in recorder.record(message):
                    self._observer.agent_tool_used(
                        instance=instance.name, tool_name=tool_name, succeeded=succeeded
                    )
        except ClaudeSDKError as exc:
            raise AgentInvocationError(reason=str(exc)) from exc

        result = recorder.result
        if result is None:
            raise AgentInvocationError(reason="no ResultMessage in response stream")
        if result.is_error:
            raise AgentInvocationError(
                reason=f"agent returned error response: {result.result}"
            )
        return recorder

    async def _capture_diff(self, worktree: Path) -> str:
        """Stage everything in the worktree and return the diff against the checkout."""
        try:
            await run_git(cwd=worktree, args=["add", "--all"])
            return await run_git(cwd=worktree, args=["diff", "--cached"])
        except GitCommandError as exc:
            raise AgentInvocationError(reason=str(exc)) from exc

    def _write_artifacts(
        self, output_directory: Path, thread_markdown: str, repository_diff: str
    ) -> None:
        try:
            (output_directory / THREAD_FILENAME).write_text(
                thread_markdown, encoding="utf-8"
            )
            (output_directory / DIFF_FILENAME).write_text(
                repository_diff, encoding="utf-8"
            )
        except OSError as exc:
            raise AgentInvocationError(reason=f"cannot write run artifacts: {exc}") from exc


class _ThreadRecorder:
    """Accumulates the SDK message stream into metrics and a markdown transcript."""

    def __init__(self, prompt: str) -> None:
        self._sections: list[str] = [f"## User\n\n{prompt}"]
        self._pending_tools: dict[str, str] = {}
        self.tool_calls: list[tuple[str, bool]] = []
        self.response_count = 0
        self.result: ResultMessage | None = None

    def record(self, message: object) -> list[tuple[str, bool]]:
        """Record one message; return the tool calls it resolved."""
        if isinstance(message, AssistantMessage):
            self.response_count += 1
            self._record_assistant(message=message)
            return []
        if isinstance(message, UserMessage) and isinstance(message.content, list):
            return self._record_tool_results(blocks=message.content)
        if isinstance(message, ResultMessage):
            self.result = message
        return []

    def _record_assistant(self, message: AssistantMessage) -> None:
        parts: list[str] = []
        for block in message.content:
            if isinstance(block, TextBlock):
                parts.append(block.text)
            elif isinstance(block, ToolUseBlock):
                self._pending_tools[block.id] = block.name
                tool_input = json.dumps(block.input, indent=2, sort_keys=True)
                parts.append(f"**Tool call** `{block.name}`\n\n```json\n{tool_input}\n```")
        if parts:
            self._sections.append("## Assistant\n\n" + "\n\n".join(parts))

    def _record_tool_results(self, blocks: list[Any]) -> list[tuple[str, bool]]:
        resolved: list[tuple[str, bool]] = []
        for block in blocks:
            if not isinstance(block, ToolResultBlock):
                continue
            tool_name = self._pending_tools.pop(block.tool_use_id, "unknown")
            succeeded = not block.is_error
            resolved.append((tool_name, succeeded))
            label = "Tool result" if succeeded else "Tool error"
            self._sections.append(
                f"**{label}** `{tool_name}`\n\n```\n{_content_text(block.content)}\n```"
            )
        self.tool_calls.extend(resolved)
        return resolved

    def markdown(self) -> str:
        return "\n\n".join(self._sections) + "\n"

    def token_usage(self) -> TokenUsage:
        raw: dict[str, Any] = (self.result.usage if self.result else None) or {}
        return TokenUsage(
            input_tokens=raw.get("input_tokens") or 0,
            output_tokens=raw.get("output_tokens") or 0,
            cache_creation_input_tokens=raw.get("cache_creation_input_tokens") or 0,
            cache_read_input_tokens=raw.get("cache_read_input_tokens") or 0,
        )

    def cost_usd(self) -> float | None:
        return self.result.total_cost_usd if self.result else None


def _content_text(content: str | list[dict[str, Any]] | None) -> str:
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    return "\n".join(str(item.get("text", item)) for item in content)
