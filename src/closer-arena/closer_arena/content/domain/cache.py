"""ProfileCache — explicit, owned cache of loaded counter-agent profiles."""

from closer_arena.content.domain.profile import CounterAgentProfile, ProfileId


class ProfileCache:
    """Holds profiles for the lifetime of its owner.

    Eviction policy: none. Profiles are immutable once referenced, so an entry
    stays valid until the owning repository (and this cache) is discarded.
    Create a new cache to observe edited profile files.
    """

    def __init__(self) -> None:
        self._entries: dict[ProfileId, CounterAgentProfile] = {}
        self.hits = 0
        self.misses = 0

    def get(self, profile_id: ProfileId) -> CounterAgentProfile | None:
        profile = self._entries.get(profile_id)
        if profile is None:
            self.misses += 1
        else:
            self.hits += 1
        return profile

    def put(self, profile: CounterAgentProfile) -> None:
        self._entries[profile.profile_id] = profile

    def __len__(self) -> int:
        return len(self._entries)
