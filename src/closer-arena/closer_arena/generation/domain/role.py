"""Role — which side of a session is speaking."""

from enum import StrEnum


class Role(StrEnum):
    """The two participants in a session. The scripted role always speaks first."""

    SCRIPTED = "scripted"
    COUNTER_AGENT = "counter_agent"

    def opposite(self) -> "Role":
        return Role.COUNTER_AGENT if self is Role.SCRIPTED else Role.SCRIPTED

    @property
    def transcript_label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Role.SCRIPTED: "CLOSER",
    Role.COUNTER_AGENT: "PERSONA",
}
