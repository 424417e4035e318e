"""ProfileRepository Protocol — source of counter-agent profiles."""

from typing import Protocol

from closer_arena.content.domain.profile import CounterAgentProfile, ProfileId


class ProfileRepository(Protocol):
    def get(self, profile_id: ProfileId) -> CounterAgentProfile:
        """Return the profile. Raises ProfileNotFoundError if it does not exist."""
        ...
