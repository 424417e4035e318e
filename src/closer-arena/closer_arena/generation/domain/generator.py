"""Generator Protocol — structural interface for the conversational model."""

from typing import Protocol

from closer_arena.generation.domain.result import GenerationResult
from closer_arena.generation.domain.role import Role


class Generator(Protocol):
    """Produces one reply for a role from a bounded context.

    The context is the role's fixed system instruction plus a single prompt:
    the opposing side's most recent turn, or an opening prompt on turn one.
    Implementations raise GenerationError on any failure.
    """

    async def generate(
        self,
        role: Role,
        system_instruction: str,
        prompt: str,
        temperature: float | None = None,
    ) -> GenerationResult: ...
