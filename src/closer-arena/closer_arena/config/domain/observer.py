"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, name: str, version: str) -> None: ...

    def config_kill_threshold_warning(
        self, kill_threshold_usd: float, daily_cap_usd: float
    ) -> None: ...
