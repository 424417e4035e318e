"""Structlog implementation of the PromotionObserver port."""

import structlog


class StructlogPromotionObserver:
    """Delegates promotion events to structlog.

    Satisfies the PromotionObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def tactic_promoted(self, session_id: str, source: str, priority: int) -> None:
        self._log.info(
            "promotion.tactic_promoted",
            session_id=session_id,
            source=source,
            priority=priority,
        )

    def tactic_skipped(self, session_id: str, reason: str) -> None:
        self._log.debug("promotion.tactic_skipped", session_id=session_id, reason=reason)

    def instructions_written(self, path: str, tactic_count: int) -> None:
        self._log.info(
            "promotion.instructions_written", path=path, tactic_count=tactic_count
        )
