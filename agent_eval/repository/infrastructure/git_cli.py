"""Thin async wrapper around the git command line."""

import asyncio
from pathlib import Path

from agent_eval.repository.infrastructure.errors import GitCommandError


async def run_git(cwd: Path, args: list[str]) -> str:
    """Run ``git <args>`` in cwd and return its stripped stdout.

    Raises:
        GitCommandError: if git cannot be started or exits non-zero.
    """
    try:
        process = await asyncio.create_subprocess_exec(
            "git",
            *args,
            cwd=cwd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as exc:
        raise GitCommandError(args=args, cwd=cwd, reason=str(exc)) from exc

    stdout, stderr = await process.communicate()
    if process.returncode != 0:
        reason = stderr.decode(errors="replace").strip() or (
            f"exit status {process.returncode}"
        )
        raise GitCommandError(args=args, cwd=cwd, reason=reason)
    return stdout.decode(errors="replace").strip()


async def current_commit_id(path: Path = Path(".")) -> str:
    """Return HEAD of the repository at path, or "" when it cannot be determined."""
    try:
        return await run_git(cwd=path, args=["rev-parse", "HEAD"])
    except GitCommandError:
        return ""
