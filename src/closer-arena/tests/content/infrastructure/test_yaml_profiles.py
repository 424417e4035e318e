"""Tests for YamlProfileRepository, CachingProfileRepository and instruction loading."""

from pathlib import Path

import pytest

from closer_arena.content.domain.cache import ProfileCache
from closer_arena.content.domain.errors import ContentLoadError, ProfileNotFoundError
from closer_arena.content.infrastructure.instructions import load_scripted_instructions
from closer_arena.content.infrastructure.yaml_profiles import (
    CachingProfileRepository,
    YamlProfileRepository,
)
from tests.content.fake_repository import FakeProfileRepository

_PROFILES_YAML = """\
skeptical-landlord:
  name: Skeptical Landlord
  instructions: You own three rental units and distrust investors.
  dials:
    skepticism: 0.8
rushed-heir:
  name: Rushed Heir
  instructions: You inherited a house and want it gone.
"""


def _write(tmp_path: Path, content: str, name: str = "profiles.yaml") -> Path:
    path = tmp_path / name
    path.write_text(content)
    return path


class TestYamlProfileRepository:
    """get() builds profiles keyed by their YAML id."""

    def test_loads_profile_with_dials(self, tmp_path: Path) -> None:
        repo = YamlProfileRepository(path=_write(tmp_path, _PROFILES_YAML))

        profile = repo.get("skeptical-landlord")

        assert profile.profile_id == "skeptical-landlord"
        assert profile.name == "Skeptical Landlord"
        assert profile.dials == {"skepticism": 0.8}

    def test_dials_default_to_empty(self, tmp_path: Path) -> None:
        repo = YamlProfileRepository(path=_write(tmp_path, _PROFILES_YAML))

        assert repo.get("rushed-heir").dials == {}

    def test_list_ids_in_file_order(self, tmp_path: Path) -> None:
        repo = YamlProfileRepository(path=_write(tmp_path, _PROFILES_YAML))

        assert repo.list_ids() == ["skeptical-landlord", "rushed-heir"]

    def test_unknown_id_raises_not_found(self, tmp_path: Path) -> None:
        repo = YamlProfileRepository(path=_write(tmp_path, _PROFILES_YAML))

        with pytest.raises(ProfileNotFoundError):
            repo.get("nobody")

    def test_missing_file_raises_content_load_error(self, tmp_path: Path) -> None:
        repo = YamlProfileRepository(path=tmp_path / "absent.yaml")

        with pytest.raises(ContentLoadError):
            repo.get("x")

    def test_invalid_yaml_raises_content_load_error(self, tmp_path: Path) -> None:
        repo = YamlProfileRepository(path=_write(tmp_path, "key: [unclosed"))

        with pytest.raises(ContentLoadError):
            repo.get("key")

    def test_invalid_profile_raises_content_load_error(self, tmp_path: Path) -> None:
        content = "p:\n  name: P\n  instructions: x\n  dials:\n    urgency: 3\n"
        repo = YamlProfileRepository(path=_write(tmp_path, content))

        with pytest.raises(ContentLoadError):
            repo.get("p")

    def test_empty_file_has_no_profiles(self, tmp_path: Path) -> None:
        repo = YamlProfileRepository(path=_write(tmp_path, ""))

        assert repo.list_ids() == []


class TestCachingProfileRepository:
    """The caching wrapper loads each profile from the inner repository once."""

    def test_second_lookup_is_served_from_cache(self) -> None:
        inner = FakeProfileRepository()
        cache = ProfileCache()
        repo = CachingProfileRepository(inner=inner, cache=cache)

        first = repo.get("skeptic")
        second = repo.get("skeptic")

        assert first is second
        assert inner.lookups == ["skeptic"]
        assert cache.hits == 1

    def test_not_found_is_not_cached(self) -> None:
        inner = FakeProfileRepository()
        repo = CachingProfileRepository(inner=inner, cache=ProfileCache())

        for _ in range(2):
            with pytest.raises(ProfileNotFoundError):
                repo.get("ghost")

        assert inner.lookups == ["ghost", "ghost"]


class TestLoadScriptedInstructions:
    def test_returns_stripped_text(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "\n  Follow the 5-step process.  \n", "closer.md")

        assert load_scripted_instructions(path) == "Follow the 5-step process."

    def test_empty_file_raises(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "   \n", "closer.md")

        with pytest.raises(ContentLoadError):
            load_scripted_instructions(path)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ContentLoadError):
            load_scripted_instructions(tmp_path / "missing.md")
