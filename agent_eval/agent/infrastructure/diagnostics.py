"""DiagnosticsChecker — counts compiler diagnostics in a worktree via a per-language command."""

import asyncio
import re
from pathlib import Path

from agent_eval.agent.infrastructure.errors import DiagnosticsError

# Matches rustc/cargo short output ("warning:", "error[E0433]:") and tsc ("error TS2304:").
_DIAGNOSTIC_LINE = re.compile(r"\b(?:error|warning)(?:\[[A-Za-z0-9]+\]| TS\d+)?:")
# cargo's trailing "warning: `crate` (lib) generated 3 warnings" summary.
_SUMMARY_LINE = re.compile(r"generated \d+ (?:warning|error)s?")


class DiagnosticsChecker:
    """Runs the command configured for a language tag and counts diagnostic lines.

    The command's exit status is ignored: a failing build is exactly what
    produces diagnostics.
    """

    def __init__(self, commands: dict[str, list[str]]) -> None:
        self._commands = commands

    async def count(self, worktree: Path, language: str | None) -> int | None:
        """Return the number of diagnostics, or None when no command is configured.

        Raises:
            DiagnosticsError: if the command cannot be started.
        """
        command = self._commands.get(language) if language is not None else None
        if not command:
            return None

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                cwd=worktree,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
            )
        except OSError as exc:
            raise DiagnosticsError(command=command, reason=str(exc)) from exc

        output, _ = await process.communicate()
        return count_diagnostics(output.decode(errors="replace"))


def count_diagnostics(output: str) -> int:
    return sum(
        1
        for line in output.splitlines()
        if _DIAGNOSTIC_LINE.search(line) and not _SUMMARY_LINE.search(line)
    )
