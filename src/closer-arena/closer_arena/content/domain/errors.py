"""Error types raised by the content domain."""

from pathlib import Path

from closer_arena.core.errors import ArenaError


class ProfileNotFoundError(ArenaError):
    def __init__(self, profile_id: str) -> None:
        self.profile_id = profile_id
        super().__init__(f"Failed to find counter-agent profile '{profile_id}'")


class ContentLoadError(ArenaError):
    """Raised when a profile or instruction file cannot be read or is malformed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to load content from {path}: {reason}")


class ContentWriteError(ArenaError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to write content to {path}: {reason}")
