"""Tests for DirectoryExampleLoader against real example directories."""

from pathlib import Path

import pytest

from agent_eval.example.infrastructure.directory_loader import DirectoryExampleLoader
from agent_eval.example.infrastructure.errors import (
    ExampleLoadError,
    ExamplesRootNotFoundError,
)


def _write_example(
    root: Path,
    name: str,
    base: str = "url: https://github.com/acme/widgets.git\nrevision: abc123\n"
    "language_extension: rs\n",
    thread_criteria: str | None = None,
    skip: tuple[str, ...] = (),
) -> Path:
    path = root / name
    path.mkdir(parents=True)
    files = {
        "base.yaml": base,
        "prompt.md": "Add a widget.",
        "diff_criteria.md": "A widget is added.",
    }
    if thread_criteria is not None:
        files["thread_criteria.md"] = thread_criteria
    for filename, content in files.items():
        if filename not in skip:
            (path / filename).write_text(content, encoding="utf-8")
    return path


class TestDiscover:
    def test_returns_sorted_directories_only(self, tmp_path: Path) -> None:
        _write_example(tmp_path, "zeta")
        _write_example(tmp_path, "alpha")
        (tmp_path / "README.md").write_text("not an example", encoding="utf-8")

        paths = DirectoryExampleLoader().discover(root=tmp_path)

        assert [p.name for p in paths] == ["alpha", "zeta"]

    def test_missing_root_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ExamplesRootNotFoundError):
            DirectoryExampleLoader().discover(root=tmp_path / "absent")


class TestLoad:
    def test_loads_all_fields(self, tmp_path: Path) -> None:
        path = _write_example(tmp_path, "add_widget", thread_criteria="Uses tools well.")

        example = DirectoryExampleLoader().load(path=path)

        assert example.name == "add_widget"
        assert example.base.url == "https://github.com/acme/widgets.git"
        assert example.base.revision == "abc123"
        assert example.language == "rs"
        assert example.prompt == "Add a widget."
        assert example.diff_criteria == "A widget is added."
        assert example.thread_criteria == "Uses tools well."

    def test_thread_criteria_is_optional(self, tmp_path: Path) -> None:
        path = _write_example(tmp_path, "add_widget")

        assert DirectoryExampleLoader().load(path=path).thread_criteria is None

    def test_numeric_revision_is_read_as_string(self, tmp_path: Path) -> None:
        path = _write_example(
            tmp_path,
            "numeric",
            base="url: https://github.com/acme/widgets.git\nrevision: 1234567\n",
        )

        example = DirectoryExampleLoader().load(path=path)

        assert example.base.revision == "1234567"
        assert example.language is None

    @pytest.mark.parametrize("missing", ["base.yaml", "prompt.md", "diff_criteria.md"])
    def test_missing_required_file_raises(self, tmp_path: Path, missing: str) -> None:
        path = _write_example(tmp_path, "broken", skip=(missing,))

        with pytest.raises(ExampleLoadError, match=missing):
            DirectoryExampleLoader().load(path=path)

    def test_base_without_url_raises(self, tmp_path: Path) -> None:
        path = _write_example(tmp_path, "broken", base="revision: abc123\n")

        with pytest.raises(ExampleLoadError):
            DirectoryExampleLoader().load(path=path)

    def test_base_that_is_not_a_mapping_raises(self, tmp_path: Path) -> None:
        path = _write_example(tmp_path, "broken", base="- just\n- a list\n")

        with pytest.raises(ExampleLoadError, match="mapping"):
            DirectoryExampleLoader().load(path=path)

    @pytest.mark.parametrize("filename", ["prompt.md", "thread_criteria.md"])
    def test_file_that_is_not_utf8_raises(self, tmp_path: Path, filename: str) -> None:
        path = _write_example(tmp_path, "broken", thread_criteria="Stays focused.")
        (path / filename).write_bytes(b"\xff\xfe not utf-8 \x80")

        with pytest.raises(ExampleLoadError, match=filename):
            DirectoryExampleLoader().load(path=path)
