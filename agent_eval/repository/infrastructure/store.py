"""GitRepositoryStore — RepositoryStore backed by the git CLI."""

from pathlib import Path

from agent_eval.repository.infrastructure.errors import RepositoryPrepareError
from agent_eval.repository.infrastructure.git_cli import run_git


class GitRepositoryStore:
    """Satisfies the RepositoryStore protocol.

    Repositories are initialised empty with only ``origin`` registered;
    revisions are fetched lazily by the worktree preparer.
    """

    def is_prepared(self, path: Path) -> bool:
        return (path / ".git").is_dir()

    async def prepare(self, url: str, path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise RepositoryPrepareError(url=url, reason=str(exc)) from exc
        await run_git(cwd=path, args=["init"])
        await run_git(cwd=path, args=["remote", "add", "origin", url])

    async def origin(self, path: Path) -> str | None:
        remotes = await run_git(cwd=path, args=["remote"])
        if "origin" not in remotes.splitlines():
            return None
        return await run_git(cwd=path, args=["remote", "get-url", "origin"])
