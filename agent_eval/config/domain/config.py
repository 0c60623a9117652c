"""Top-level EvalConfig aggregate — the root configuration object."""

from pydantic import BaseModel, Field

from agent_eval.config.domain.agent import AgentConfig
from agent_eval.config.domain.execution import ExecutionConfig
from agent_eval.config.domain.judge import JudgeConfig
from agent_eval.config.domain.paths import PathsConfig

type LanguageTag = str

DEFAULT_MODEL = "claude-3-7-sonnet-latest"


class EvalConfig(BaseModel, frozen=True):
    """Root configuration aggregate for an agent-eval run.

    Every field has a default so that the harness runs without a config file;
    the CLI layers its options on top via ``apply_overrides``.
    """

    model: str = Field(default=DEFAULT_MODEL, min_length=1)
    languages: list[LanguageTag] = Field(default_factory=lambda: ["rs", "ts"])
    paths: PathsConfig = Field(default_factory=PathsConfig)
    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)
    agent: AgentConfig = Field(default_factory=AgentConfig)
    judge: JudgeConfig = Field(default_factory=JudgeConfig)
    # Command (argv) whose output is scanned for diagnostics, per language tag.
    diagnostics: dict[LanguageTag, list[str]] = Field(default_factory=dict)

    @property
    def judge_model(self) -> str:
        return self.judge.model or self.model
