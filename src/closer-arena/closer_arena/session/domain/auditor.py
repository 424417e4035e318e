"""TranscriptAuditor — optional post-completion capability for high-scoring sessions."""

from typing import Protocol

from closer_arena.session.domain.session import Session


class TranscriptAuditor(Protocol):
    """Runs an extra review of a completed, high-scoring session.

    Raises ArenaError subclasses on failure; the orchestrator logs and ignores
    them because the session is already complete.
    """

    async def audit(self, session: Session) -> None: ...


class NullTranscriptAuditor:
    """Injected when no audit capability is available."""

    async def audit(self, session: Session) -> None:
        return None
