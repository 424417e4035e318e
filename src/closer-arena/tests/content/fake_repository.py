"""FakeProfileRepository — in-memory ProfileRepository for use in tests."""

from closer_arena.content.domain.errors import ProfileNotFoundError
from closer_arena.content.domain.profile import CounterAgentProfile


def make_profile(
    profile_id: str = "skeptic",
    instructions: str = "You are a skeptical property owner.",
    dials: dict[str, float] | None = None,
) -> CounterAgentProfile:
    return CounterAgentProfile(
        profile_id=profile_id,
        name=profile_id.title(),
        instructions=instructions,
        dials=dials if dials is not None else {},
    )


class FakeProfileRepository:
    """Satisfies the ProfileRepository protocol and counts lookups."""

    def __init__(self, profiles: list[CounterAgentProfile] | None = None) -> None:
        self._profiles = {p.profile_id: p for p in (profiles or [make_profile()])}
        self._lookups: list[str] = []

    @property
    def lookups(self) -> list[str]:
        return self._lookups

    def get(self, profile_id: str) -> CounterAgentProfile:
        self._lookups.append(profile_id)
        profile = self._profiles.get(profile_id)
        if profile is None:
            raise ProfileNotFoundError(profile_id=profile_id)
        return profile
