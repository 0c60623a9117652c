"""ExampleRegistry — filters, expands and tags examples into ScheduledInstances."""

from pathlib import Path

from agent_eval.example.domain.example import ExampleDefinition
from agent_eval.example.domain.instance import ScheduledInstance, instance_name
from agent_eval.example.domain.loader import ExampleLoader
from agent_eval.example.domain.observer import ExampleObserver

COLORS: tuple[str, ...] = (
    "\033[31m",  # red
    "\033[32m",  # green
    "\033[33m",  # yellow
    "\033[34m",  # blue
    "\033[35m",  # magenta
    "\033[36m",  # cyan
    "\033[91m",  # bright red
    "\033[92m",  # bright green
    "\033[93m",  # bright yellow
    "\033[94m",  # bright blue
    "\033[95m",  # bright magenta
    "\033[96m",  # bright cyan
)


class ExampleRegistry:
    """Turns the examples root into the ordered list of instances to run."""

    def __init__(self, loader: ExampleLoader, observer: ExampleObserver) -> None:
        self._loader = loader
        self._observer = observer

    def schedule(
        self,
        root: Path,
        filters: list[str],
        languages: list[str],
        repetitions: int,
        run_directory: Path,
        worktrees_directory: Path,
    ) -> list[ScheduledInstance]:
        """Return the filtered, repetition-expanded, presentation-tagged instances.

        A directory matches when its name contains any of ``filters`` (all match
        when ``filters`` is empty). Examples without a language tag, or with one
        outside ``languages``, are skipped and reported. An empty return value
        means there is nothing to run; it is not an error.
        """
        paths = self._loader.discover(root=root)
        matched = [path for path in paths if _matches(name=path.name, filters=filters)]
        self._observer.examples_discovered(
            root=str(root), total=len(paths), matched=len(matched)
        )

        selected: list[ExampleDefinition] = []
        skipped: list[str] = []
        for path in matched:
            example = self._loader.load(path=path)
            if example.language is None or example.language not in languages:
                skipped.append(example.name)
                continue
            selected.append(example)

        if skipped:
            self._observer.examples_skipped(names=skipped, allowed_languages=languages)

        expanded = [
            (example, repetition_index)
            for example in selected
            for repetition_index in range(repetitions)
        ]
        name_width = max(
            (len(instance_name(example.name, index)) for example, index in expanded),
            default=0,
        )

        instances: list[ScheduledInstance] = []
        for position, (example, repetition_index) in enumerate(expanded):
            instance = ScheduledInstance(
                example=example,
                repetition_index=repetition_index,
                color=COLORS[position % len(COLORS)],
                name_width=name_width,
                run_directory=run_directory,
                worktree_directory=worktrees_directory
                / instance_name(example.name, repetition_index),
            )
            self._observer.instance_scheduled(
                name=instance.name,
                repetition_index=repetition_index,
                output_directory=str(instance.output_directory),
            )
            instances.append(instance)
        return instances


def _matches(name: str, filters: list[str]) -> bool:
    return not filters or any(term in name for term in filters)
