"""YamlProfileRepository — counter-agent profiles from a YAML file."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from closer_arena.content.domain.cache import ProfileCache
from closer_arena.content.domain.errors import ContentLoadError, ProfileNotFoundError
from closer_arena.content.domain.profile import CounterAgentProfile, ProfileId
from closer_arena.content.domain.repository import ProfileRepository


class YamlProfileRepository:
    """Reads profiles keyed by id from a YAML mapping::

        skeptical-landlord:
          name: Skeptical Landlord
          instructions: You own three rental units and distrust investors...
          dials:
            skepticism: 0.8

    The file is parsed on every lookup; wrap in CachingProfileRepository to
    avoid re-reading it.

    Does NOT inherit from ProfileRepository (structural typing via Protocol).
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    def get(self, profile_id: ProfileId) -> CounterAgentProfile:
        profiles = self._read()
        data = profiles.get(profile_id)
        if data is None:
            raise ProfileNotFoundError(profile_id=profile_id)
        if not isinstance(data, dict):
            raise ContentLoadError(
                path=self._path, reason=f"profile '{profile_id}' must be a mapping"
            )
        try:
            return CounterAgentProfile.model_validate(
                {**data, "profile_id": profile_id}
            )
        except ValidationError as exc:
            raise ContentLoadError(path=self._path, reason=str(exc)) from exc

    def list_ids(self) -> list[ProfileId]:
        return list(self._read().keys())

    def _read(self) -> dict[str, Any]:
        try:
            with self._path.open(encoding="utf-8") as fh:
                raw = yaml.safe_load(fh)
        except FileNotFoundError as exc:
            raise ContentLoadError(path=self._path, reason="file not found") from exc
        except yaml.YAMLError as exc:
            raise ContentLoadError(path=self._path, reason=f"invalid YAML ({exc})") from exc
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise ContentLoadError(
                path=self._path, reason="top-level value must map profile ids to profiles"
            )
        return raw


class CachingProfileRepository:
    """Serves profiles from an owned ProfileCache, loading misses from ``inner``."""

    def __init__(self, inner: ProfileRepository, cache: ProfileCache) -> None:
        self._inner = inner
        self._cache = cache

    def get(self, profile_id: ProfileId) -> CounterAgentProfile:
        cached = self._cache.get(profile_id)
        if cached is not None:
            return cached
        profile = self._inner.get(profile_id)
        self._cache.put(profile)
        return profile
