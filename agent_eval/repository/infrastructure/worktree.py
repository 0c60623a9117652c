"""WorktreePreparer — creates or resets one git worktree per instance."""

from pathlib import Path

from agent_eval.example.domain.instance import ScheduledInstance
from agent_eval.repository.domain.repository import repository_directory_name
from agent_eval.repository.infrastructure.errors import GitCommandError, SetupError
from agent_eval.repository.infrastructure.git_cli import run_git

PROMPT_FILENAME = "prompt.md"


class WorktreePreparer:
    """Satisfies the InstancePreparer protocol using git worktrees.

    Each instance gets its own worktree checked out (detached) at the example
    revision. The revision is fetched into the cached repository first when it
    is not already present there.
    """

    def __init__(self, repos_root: Path) -> None:
        self._repos_root = repos_root

    async def setup(self, instance: ScheduledInstance) -> None:
        """Prepare the worktree and output directory for instance.

        Raises:
            SetupError: if any git or filesystem step fails.
        """
        base = instance.example.base
        repo_path = self._repos_root / repository_directory_name(base.url)
        try:
            commit = await self._resolve_revision(
                repo_path=repo_path, revision=base.revision
            )
            await self._checkout(
                repo_path=repo_path,
                worktree=instance.worktree_directory,
                commit=commit,
            )
            instance.output_directory.mkdir(parents=True, exist_ok=True)
            (instance.output_directory / PROMPT_FILENAME).write_text(
                instance.example.prompt, encoding="utf-8"
            )
        except (GitCommandError, OSError) as exc:
            raise SetupError(instance_name=instance.name, reason=str(exc)) from exc

    async def _resolve_revision(self, repo_path: Path, revision: str) -> str:
        """Return the commit id for revision, fetching it from origin if needed."""
        try:
            return await run_git(
                cwd=repo_path, args=["rev-parse", "--verify", f"{revision}^{{commit}}"]
            )
        except GitCommandError:
            await run_git(
                cwd=repo_path, args=["fetch", "--depth", "1", "origin", revision]
            )
        return await run_git(
            cwd=repo_path, args=["rev-parse", "--verify", "FETCH_HEAD^{commit}"]
        )

    async def _checkout(self, repo_path: Path, worktree: Path, commit: str) -> None:
        if worktree.is_dir():
            await run_git(cwd=worktree, args=["checkout", "--force", "--detach", commit])
            await run_git(cwd=worktree, args=["clean", "-fd"])
            return
        worktree.parent.mkdir(parents=True, exist_ok=True)
        await run_git(
            cwd=repo_path,
            args=["worktree", "add", "-f", "--detach", str(worktree.resolve()), commit],
        )
