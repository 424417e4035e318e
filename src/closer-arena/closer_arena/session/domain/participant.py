"""Participant Protocol — one side of a session."""

from typing import Protocol

from closer_arena.generation.domain.result import GenerationResult
from closer_arena.generation.domain.role import Role


class Participant(Protocol):
    """A role-bound speaker with a fixed system instruction.

    next_turn() sees only the opposing side's most recent turn (None on the
    opening turn), never the full history.
    """

    @property
    def role(self) -> Role: ...

    @property
    def system_instruction(self) -> str: ...

    async def next_turn(self, last_opposing_turn: str | None) -> GenerationResult: ...
