"""YAML config loader — parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from agent_eval.config.domain.config import EvalConfig
from agent_eval.config.domain.observer import ConfigObserver
from agent_eval.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from agent_eval.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns an EvalConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> EvalConfig:
        """
        Load, interpolate, validate, and return an EvalConfig from a YAML file.

        An empty file yields the default configuration.

        Raises:
            ConfigLoadError: if the file does not exist or is not valid YAML.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the schema is violated.
        """
        raw = _parse_yaml(path=path)
        _check_missing_env_vars(raw=raw)
        cfg = _build_config(resolved=interpolate(raw))
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(
            path=str(path),
            model=cfg.model,
            judge_model=cfg.judge_model,
            languages=cfg.languages,
        )
        return cfg


def apply_overrides(config: EvalConfig, **overrides: Any) -> EvalConfig:
    """Return a re-validated copy of config with CLI overrides applied.

    ``None`` values are ignored. ``repetitions``, ``judge_repetitions`` and
    ``concurrency`` land in the execution section; everything else is top-level.

    Raises:
        ConfigValidationError: if an override violates the schema.
    """
    execution_keys = {"repetitions", "judge_repetitions", "concurrency"}
    data = config.model_dump()
    for key, value in overrides.items():
        if value is None:
            continue
        if key in execution_keys:
            data["execution"][key] = value
        else:
            data[key] = value
    return _build_config(resolved=data)


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason=f"invalid YAML ({exc})") from exc
    return raw if raw is not None else {}


def _check_missing_env_vars(raw: Any) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _build_config(resolved: Any) -> EvalConfig:
    try:
        return EvalConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _emit_warnings(cfg: EvalConfig, observer: ConfigObserver) -> None:
    if cfg.judge.temperature > 0.0:
        observer.config_judge_temperature_warning(
            temperature=cfg.judge.temperature,
            judge_repetitions=cfg.execution.judge_repetitions,
        )
