"""CLI entrypoint for agent-eval — typer app with a `run` command."""

import asyncio
import sys
import uuid
from datetime import datetime
from pathlib import Path

import structlog
import typer

from agent_eval.agent.infrastructure.diagnostics import DiagnosticsChecker
from agent_eval.agent.infrastructure.observer import StructlogAgentObserver
from agent_eval.agent.infrastructure.registry import create_agent
from agent_eval.cli.output.report import RESULTS_FILENAME, render_report, write_results
from agent_eval.config.domain.config import EvalConfig
from agent_eval.config.infrastructure.observer import StructlogConfigObserver
from agent_eval.config.infrastructure.yaml_loader import (
    YamlConfigLoader,
    apply_overrides,
)
from agent_eval.core.errors import AgentEvalError
from agent_eval.evaluation.application.judging import JudgeAggregator
from agent_eval.evaluation.application.runner import EvaluationRunner
from agent_eval.evaluation.application.scheduler import RunScheduler
from agent_eval.evaluation.application.setup import SetupSequencer
from agent_eval.evaluation.domain.observer import EvaluationObserver
from agent_eval.evaluation.domain.run import RUN_DIRECTORY_FORMAT
from agent_eval.evaluation.domain.summary import EvaluationReport
from agent_eval.evaluation.infrastructure.composite_observer import (
    CompositeEvaluationObserver,
)
from agent_eval.evaluation.infrastructure.observer import StructlogEvaluationObserver
from agent_eval.evaluation.infrastructure.progress_observer import (
    ProgressEvaluationObserver,
)
from agent_eval.example.application.registry import ExampleRegistry
from agent_eval.example.infrastructure.directory_loader import DirectoryExampleLoader
from agent_eval.example.infrastructure.observer import StructlogExampleObserver
from agent_eval.judge.infrastructure.litellm import LiteLLMJudge
from agent_eval.judge.infrastructure.observer import StructlogJudgeObserver
from agent_eval.model.infrastructure.litellm_resolver import LiteLLMModelResolver
from agent_eval.repository.application.cache import RepositoryCache
from agent_eval.repository.infrastructure.git_cli import current_commit_id
from agent_eval.repository.infrastructure.observer import StructlogRepositoryObserver
from agent_eval.repository.infrastructure.store import GitRepositoryStore
from agent_eval.repository.infrastructure.worktree import WorktreePreparer
from agent_eval.telemetry.domain.sink import TelemetrySink
from agent_eval.telemetry.infrastructure.errors import TelemetryFlushError
from agent_eval.telemetry.infrastructure.ids import (
    INSTALLATION_ID_FILENAME,
    get_or_create_id,
)
from agent_eval.telemetry.infrastructure.jsonl_sink import JsonlTelemetrySink

app = typer.Typer(add_completion=False)

TELEMETRY_FILENAME = "telemetry.jsonl"


@app.callback()
def main() -> None:
    """agent-eval — evaluate coding agents against benchmark examples."""


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(
            f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.",
            err=True,
        )
        sys.exit(1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_config(config_path: Path | None) -> EvalConfig:
    if config_path is None:
        return EvalConfig()
    return YamlConfigLoader(observer=StructlogConfigObserver()).load(path=config_path)


def _parse_languages(languages: str | None) -> list[str] | None:
    if languages is None:
        return None
    return [tag.strip() for tag in languages.split(",") if tag.strip()]


def _installation_id(state_dir: Path) -> str | None:
    """Return the persistent installation id, or None when it cannot be stored."""
    try:
        return get_or_create_id(path=state_dir / INSTALLATION_ID_FILENAME)
    except OSError as exc:
        structlog.get_logger().warning(
            "telemetry.installation_id_unavailable", reason=str(exc)
        )
        return None


def _build_runner(
    config: EvalConfig,
    telemetry: JsonlTelemetrySink,
    evaluation_observer: EvaluationObserver,
) -> EvaluationRunner:
    """Wire every production adapter into an EvaluationRunner."""
    agent = create_agent(
        config=config.agent,
        diagnostics=DiagnosticsChecker(commands=config.diagnostics),
        observer=StructlogAgentObserver(),
    )
    judge = LiteLLMJudge(
        model=config.judge_model,
        temperature=config.judge.temperature,
        observer=StructlogJudgeObserver(),
    )
    judge_aggregator = JudgeAggregator(
        judge=judge,
        telemetry=telemetry,
        commit_id=current_commit_id,
        session_id=str(uuid.uuid4()),
        installation_id=_installation_id(state_dir=config.paths.state_dir),
        observer=evaluation_observer,
    )
    return EvaluationRunner(
        config=config,
        model_resolver=LiteLLMModelResolver(),
        registry=ExampleRegistry(
            loader=DirectoryExampleLoader(), observer=StructlogExampleObserver()
        ),
        repository_cache=RepositoryCache(
            root=config.paths.repos_dir,
            store=GitRepositoryStore(),
            observer=StructlogRepositoryObserver(),
        ),
        setup_sequencer=SetupSequencer(
            preparer=WorktreePreparer(repos_root=config.paths.repos_dir),
            observer=evaluation_observer,
        ),
        scheduler=RunScheduler(
            agent=agent,
            judge_aggregator=judge_aggregator,
            concurrency=config.execution.concurrency,
            judge_repetitions=config.execution.judge_repetitions,
            observer=evaluation_observer,
        ),
        observer=evaluation_observer,
    )


def _publish(report: EvaluationReport, telemetry: TelemetrySink) -> None:
    """Print the report, persist results.json and flush telemetry.

    Telemetry is flushed even when results.json cannot be written.
    """
    typer.echo(render_report(report=report))
    try:
        write_results(report=report, path=report.run_directory / RESULTS_FILENAME)
    finally:
        try:
            telemetry.flush()
        except TelemetryFlushError as exc:
            structlog.get_logger().warning("telemetry.flush_failed", reason=str(exc))


@app.command()
def run(
    examples: list[str] | None = typer.Argument(
        None, help="Only run examples whose directory name contains one of these"
    ),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to an agent-eval config YAML"
    ),
    model: str | None = typer.Option(None, "--model", help="Model to evaluate"),
    languages: str | None = typer.Option(
        None, "--languages", help="Comma-separated language tags to include (e.g. rs,ts)"
    ),
    repetitions: int | None = typer.Option(
        None, "--repetitions", help="Runs per example"
    ),
    judge_repetitions: int | None = typer.Option(
        None, "--judge-repetitions", help="Judge rounds per run"
    ),
    concurrency: int | None = typer.Option(
        None, "--concurrency", help="Maximum agent runs in flight"
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Run coding-agent evaluations over the examples directory."""
    exit_code = 0
    try:
        _configure_structlog(log_format=log_format)

        config = apply_overrides(
            _load_config(config_path=config_path),
            model=model,
            languages=_parse_languages(languages=languages),
            repetitions=repetitions,
            judge_repetitions=judge_repetitions,
            concurrency=concurrency,
        )

        run_directory = config.paths.runs_dir / datetime.now().strftime(
            RUN_DIRECTORY_FORMAT
        )
        telemetry = JsonlTelemetrySink(path=run_directory / TELEMETRY_FILENAME)

        observers: list[EvaluationObserver] = [StructlogEvaluationObserver()]
        if log_format != "json":
            observers.append(ProgressEvaluationObserver())
        evaluation_observer = CompositeEvaluationObserver(observers=observers)

        runner = _build_runner(
            config=config,
            telemetry=telemetry,
            evaluation_observer=evaluation_observer,
        )
        report = asyncio.run(
            runner.run(filters=examples or [], run_directory=run_directory)
        )

        if report is None:
            typer.echo("Filter matched no examples", err=True)
        else:
            _publish(report=report, telemetry=telemetry)
            if report.summary.error_count > 0:
                exit_code = 1

    except KeyboardInterrupt:
        typer.echo("Evaluation interrupted.", err=True)
        sys.exit(1)
    except AgentEvalError as exc:
        typer.echo(str(exc), err=True)
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.", err=True)
        sys.exit(1)

    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    app()
