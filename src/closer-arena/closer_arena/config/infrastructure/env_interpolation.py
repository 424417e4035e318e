"""Recursive ${ENV_VAR} / ${ENV_VAR:-default} interpolation for raw config data."""

import os
import re
from collections.abc import Callable

_ENV_VAR_PATTERN = re.compile(
    r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::-(?P<default>[^}]*))?\}"
)

type RawValue = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def collect_missing_vars(data: RawValue) -> list[str]:
    """Return every referenced env var that is unset and has no inline default.

    Names are returned in first-seen order, each once, so that a caller can
    report all of them in a single error.
    """
    missing: list[str] = []
    _walk_strings(data, lambda text: _collect_from(text, missing))
    return missing


def interpolate(data: RawValue) -> RawValue:
    """Return a copy of data with every reference replaced by its value.

    An unset variable falls back to its inline default. Call
    `collect_missing_vars` first; a variable with neither raises KeyError.
    """
    if isinstance(data, str):
        return _ENV_VAR_PATTERN.sub(_resolve, data)
    if isinstance(data, list):
        return [interpolate(item) for item in data]
    if isinstance(data, dict):
        return {key: interpolate(value) for key, value in data.items()}
    return data


def _resolve(match: re.Match[str]) -> str:
    name = match.group("name")
    default = match.group("default")
    if name in os.environ:
        return os.environ[name]
    if default is not None:
        return default
    raise KeyError(name)


def _collect_from(text: str, missing: list[str]) -> None:
    for match in _ENV_VAR_PATTERN.finditer(text):
        name = match.group("name")
        if (
            name not in os.environ
            and match.group("default") is None
            and name not in missing
        ):
            missing.append(name)


def _walk_strings(data: RawValue, visit: Callable[[str], None]) -> None:
    if isinstance(data, str):
        visit(data)
    elif isinstance(data, list):
        for item in data:
            _walk_strings(item, visit)
    elif isinstance(data, dict):
        for value in data.values():
            _walk_strings(value, visit)
