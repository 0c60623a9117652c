"""Directory example loader — one example per sub-directory of the examples root.

Layout of an example directory::

    <name>/
        base.yaml            # url, revision, language_extension
        prompt.md            # task handed to the agent
        diff_criteria.md     # what the diff judge looks for
        thread_criteria.md   # optional; enables thread judging
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from agent_eval.example.domain.example import ExampleDefinition, RepositoryBase
from agent_eval.example.infrastructure.errors import (
    ExampleLoadError,
    ExamplesRootNotFoundError,
)

_BASE_FILE = "base.yaml"
_PROMPT_FILE = "prompt.md"
_DIFF_CRITERIA_FILE = "diff_criteria.md"
_THREAD_CRITERIA_FILE = "thread_criteria.md"


class DirectoryExampleLoader:
    """Satisfies the ExampleLoader protocol for on-disk example directories."""

    def discover(self, root: Path) -> list[Path]:
        """Return every example directory under root, sorted by name.

        Raises:
            ExamplesRootNotFoundError: if root is not a directory.
        """
        if not root.is_dir():
            raise ExamplesRootNotFoundError(root=root)
        return sorted(
            (entry for entry in root.iterdir() if entry.is_dir()),
            key=lambda entry: entry.name,
        )

    def load(self, path: Path) -> ExampleDefinition:
        """Load one example directory into an ExampleDefinition.

        Raises:
            ExampleLoadError: if a required file is missing, a file is not valid
                UTF-8 text, or base.yaml is invalid.
        """
        raw_base = self._read_base(path=path)
        try:
            base = RepositoryBase.model_validate(raw_base)
        except ValidationError as exc:
            raise ExampleLoadError(path=path, reason=str(exc)) from exc

        return ExampleDefinition(
            name=path.name,
            path=path,
            base=base,
            prompt=self._read_required(path=path, filename=_PROMPT_FILE),
            diff_criteria=self._read_required(path=path, filename=_DIFF_CRITERIA_FILE),
            thread_criteria=self._read_optional(
                path=path, filename=_THREAD_CRITERIA_FILE
            ),
        )

    def _read_base(self, path: Path) -> Any:
        text = self._read_required(path=path, filename=_BASE_FILE)
        try:
            raw = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ExampleLoadError(
                path=path, reason=f"invalid {_BASE_FILE}: {exc}"
            ) from exc
        if not isinstance(raw, dict):
            raise ExampleLoadError(path=path, reason=f"{_BASE_FILE} must be a mapping")
        # YAML reads unquoted hex-looking revisions such as 1e10 as numbers.
        if "revision" in raw and raw["revision"] is not None:
            raw["revision"] = str(raw["revision"])
        return raw

    def _read_required(self, path: Path, filename: str) -> str:
        file_path = path / filename
        if not file_path.is_file():
            raise ExampleLoadError(path=path, reason=f"missing {filename}")
        return self._read_text(path=path, file_path=file_path)

    def _read_optional(self, path: Path, filename: str) -> str | None:
        file_path = path / filename
        if not file_path.is_file():
            return None
        return self._read_text(path=path, file_path=file_path)

    def _read_text(self, path: Path, file_path: Path) -> str:
        try:
            return file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ExampleLoadError(
                path=path, reason=f"cannot read {file_path.name}: {exc}"
            ) from exc
