"""EvaluationRunner — orchestrates the full evaluation pipeline."""

import time
import uuid
from datetime import datetime
from pathlib import Path

from agent_eval.config.domain.config import EvalConfig
from agent_eval.evaluation.application.aggregation import summarize
from agent_eval.evaluation.application.scheduler import RunScheduler
from agent_eval.evaluation.application.setup import SetupSequencer
from agent_eval.evaluation.domain.observer import EvaluationObserver
from agent_eval.evaluation.domain.run import RUN_DIRECTORY_FORMAT
from agent_eval.evaluation.domain.summary import EvaluationReport
from agent_eval.evaluation.infrastructure.errors import WorkspaceError
from agent_eval.example.application.registry import ExampleRegistry
from agent_eval.model.domain.resolver import ModelResolver
from agent_eval.repository.application.cache import RepositoryCache


class EvaluationRunner:
    """Runs the full evaluation: resolve model, schedule, prepare, run, judge, fold.

    Phases are strictly ordered: the model is resolved before anything is
    scheduled, every repository is ready before any setup starts, every
    instance is set up before any agent runs, and aggregation starts only once
    every run and judge round has settled. Any error raised before the run
    phase aborts the evaluation; run and judge failures are recorded instead.
    """

    def __init__(
        self,
        config: EvalConfig,
        model_resolver: ModelResolver,
        registry: ExampleRegistry,
        repository_cache: RepositoryCache,
        setup_sequencer: SetupSequencer,
        scheduler: RunScheduler,
        observer: EvaluationObserver,
    ) -> None:
        self._config = config
        self._model_resolver = model_resolver
        self._registry = registry
        self._repository_cache = repository_cache
        self._setup_sequencer = setup_sequencer
        self._scheduler = scheduler
        self._observer = observer

    async def run(
        self, filters: list[str], run_directory: Path | None = None
    ) -> EvaluationReport | None:
        """Execute the evaluation and return its report.

        Returns None, without preparing or running anything, when no example
        matches ``filters`` and the configured languages.

        Raises:
            AgentEvalError: on any fatal precondition failure (model resolution,
                workspace creation, example loading, repository mismatch, setup).
        """
        run_id = str(uuid.uuid4())
        execution = self._config.execution
        paths = self._config.paths

        model = self._model_resolver.resolve(name=self._config.model)

        if run_directory is None:
            run_directory = paths.runs_dir / datetime.now().strftime(RUN_DIRECTORY_FORMAT)
        for directory in (paths.repos_dir, paths.worktrees_dir, run_directory):
            _make_directory(path=directory)

        instances = self._registry.schedule(
            root=paths.examples_dir,
            filters=filters,
            languages=self._config.languages,
            repetitions=execution.repetitions,
            run_directory=run_directory,
            worktrees_directory=paths.worktrees_dir,
        )
        if not instances:
            self._observer.no_examples_matched(filters=filters)
            return None

        self._observer.evaluation_started(
            run_id=run_id,
            run_directory=str(run_directory),
            model=model.id,
            example_names=list(dict.fromkeys(i.example.name for i in instances)),
            total_instances=len(instances),
            repetitions=execution.repetitions,
            judge_repetitions=execution.judge_repetitions,
            concurrency=execution.concurrency,
        )
        started_at = time.monotonic()

        await self._repository_cache.prepare(instances=instances)
        await self._setup_sequencer.setup_all(instances=instances)
        results = await self._scheduler.run_all(instances=instances, model=model)

        summary = summarize(results=results)
        self._observer.evaluation_completed(
            run_id=run_id,
            total_instances=len(results),
            error_count=summary.error_count,
            elapsed_seconds=time.monotonic() - started_at,
        )

        return EvaluationReport(
            run_id=run_id,
            run_directory=run_directory,
            model=model,
            name_width=instances[0].name_width,
            results=results,
            summary=summary,
        )


def _make_directory(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise WorkspaceError(path=path, reason=str(exc)) from exc
