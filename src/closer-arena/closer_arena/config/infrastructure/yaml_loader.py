"""YAML config loader — parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from closer_arena.config.domain.config import ArenaConfig
from closer_arena.config.domain.observer import ConfigObserver
from closer_arena.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from closer_arena.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns an ArenaConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> ArenaConfig:
        """
        Load, interpolate, validate, and return an ArenaConfig from a YAML file.

        Relative paths inside the file (profiles, instructions, store) are
        resolved against the config file's directory.

        Raises:
            ConfigLoadError: if the file is missing or is not valid YAML.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the schema is violated or a configured model
                has no entry in the pricing table.
        """
        raw = _parse_yaml(path=path)
        _check_missing_env_vars(raw=raw)
        interpolated = interpolate(raw)
        cfg = _build_config(resolved=interpolated)
        _check_model_prices(cfg=cfg)
        cfg = _resolve_paths(cfg=cfg, base_dir=path.parent)
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(name=cfg.name, version=cfg.version)
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason=f"invalid YAML ({exc})") from exc


def _check_missing_env_vars(raw: Any) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _build_config(resolved: Any) -> ArenaConfig:
    if not isinstance(resolved, dict):
        raise ConfigValidationError("top-level YAML value must be a mapping")
    try:
        return ArenaConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _check_model_prices(cfg: ArenaConfig) -> None:
    """
    Every model the arena can call must be priced, otherwise its spend cannot be
    recorded against the daily budget.

    Raises:
        ConfigValidationError: listing ALL unpriced model references before raising.
    """
    references = {
        "generation.scripted_model": cfg.generation.scripted_model,
        "generation.counter_agent_model": cfg.generation.counter_agent_model,
        "scoring.model": cfg.scoring.model,
        "scoring.throttled_model": cfg.scoring.throttled_model,
        "ranking.model": cfg.ranking.model,
    }
    priced = set(cfg.pricing.models.keys())
    unknown = [
        f"{field} references unpriced model '{model}'"
        for field, model in references.items()
        if model not in priced
    ]
    if unknown:
        raise ConfigValidationError("; ".join(unknown))


def _resolve_paths(cfg: ArenaConfig, base_dir: Path) -> ArenaConfig:
    def resolve(p: Path) -> Path:
        return p if p.is_absolute() else base_dir / p

    return cfg.model_copy(
        update={
            "profiles_path": resolve(cfg.profiles_path),
            "generation": cfg.generation.model_copy(
                update={
                    "scripted_instructions_path": resolve(
                        cfg.generation.scripted_instructions_path
                    )
                }
            ),
            "store": cfg.store.model_copy(update={"path": resolve(cfg.store.path)}),
        }
    )


def _emit_warnings(cfg: ArenaConfig, observer: ConfigObserver) -> None:
    if cfg.session.kill_threshold_usd >= cfg.budget.daily_cap_usd:
        observer.config_kill_threshold_warning(
            kill_threshold_usd=cfg.session.kill_threshold_usd,
            daily_cap_usd=cfg.budget.daily_cap_usd,
        )
