"""Filesystem layout configuration model."""

from pathlib import Path

from pydantic import BaseModel


class PathsConfig(BaseModel, frozen=True):
    """Where examples are read from and where repositories, worktrees and runs live."""

    examples_dir: Path = Path("./examples")
    repos_dir: Path = Path("./.agent-eval/repos")
    worktrees_dir: Path = Path("./.agent-eval/worktrees")
    runs_dir: Path = Path("./.agent-eval/runs")
    state_dir: Path = Path("./.agent-eval")
