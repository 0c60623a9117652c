"""Recursive ${ENV_VAR} / ${ENV_VAR:-default} interpolation for raw config data."""

import os
import re

# ${NAME} or ${NAME:-fallback}; a reference with a fallback is never "missing".
_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}")

type RawValue = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def collect_missing_vars(data: RawValue) -> list[str]:
    """Return the names of all referenced env vars that are unset and have no fallback.

    Every missing var is collected before returning, in first-seen order.
    """
    missing: list[str] = []
    for text in _strings(data):
        for match in _ENV_VAR_PATTERN.finditer(text):
            name, fallback = match.group(1), match.group(2)
            if fallback is None and name not in os.environ and name not in missing:
                missing.append(name)
    return missing


def interpolate(data: RawValue) -> RawValue:
    """Recursively substitute every ${ENV_VAR} occurrence with its runtime value.

    Assumes `collect_missing_vars` returned nothing for ``data``.
    """
    if isinstance(data, str):
        return _ENV_VAR_PATTERN.sub(_substitute, data)
    if isinstance(data, list):
        return [interpolate(item) for item in data]
    if isinstance(data, dict):
        return {key: interpolate(value) for key, value in data.items()}
    return data


def _substitute(match: re.Match[str]) -> str:
    name, fallback = match.group(1), match.group(2)
    if fallback is None:
        return os.environ[name]
    return os.environ.get(name, fallback)


def _strings(data: RawValue) -> list[str]:
    if isinstance(data, str):
        return [data]
    if isinstance(data, list):
        return [text for item in data for text in _strings(item)]
    if isinstance(data, dict):
        return [text for value in data.values() for text in _strings(value)]
    return []
