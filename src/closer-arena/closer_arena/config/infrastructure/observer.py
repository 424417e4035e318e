"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, name: str, version: str) -> None:
        self._log.info("config.loaded", name=name, version=version)

    def config_kill_threshold_warning(
        self, kill_threshold_usd: float, daily_cap_usd: float
    ) -> None:
        self._log.warning(
            "config.kill_threshold_warning",
            kill_threshold_usd=kill_threshold_usd,
            daily_cap_usd=daily_cap_usd,
            message="A single session may spend the entire daily budget",
        )
