"""Scripted and counter-agent participants, and the factory that pairs them."""

from closer_arena.content.domain.profile import CounterAgentProfile
from closer_arena.content.domain.repository import ProfileRepository
from closer_arena.generation.domain.generator import Generator
from closer_arena.generation.domain.result import GenerationResult
from closer_arena.generation.domain.role import Role
from closer_arena.session.domain.participant import Participant


class ScriptedParticipant:
    """The agent under training, driven by its base instructions."""

    role = Role.SCRIPTED

    def __init__(
        self,
        instructions: str,
        generator: Generator,
        opening_prompt: str,
        temperature: float | None = None,
    ) -> None:
        self._instructions = instructions
        self._generator = generator
        self._opening_prompt = opening_prompt
        self._temperature = temperature

    @property
    def system_instruction(self) -> str:
        return self._instructions

    async def next_turn(self, last_opposing_turn: str | None) -> GenerationResult:
        return await self._generator.generate(
            role=self.role,
            system_instruction=self._instructions,
            prompt=last_opposing_turn or self._opening_prompt,
            temperature=self._temperature,
        )


class CounterAgentParticipant:
    """A generated persona, driven by its profile's rendered instruction."""

    role = Role.COUNTER_AGENT

    def __init__(
        self,
        profile: CounterAgentProfile,
        generator: Generator,
        temperature: float | None = None,
    ) -> None:
        self._profile = profile
        self._instruction = profile.render_system_instruction()
        self._generator = generator
        self._temperature = temperature

    @property
    def system_instruction(self) -> str:
        return self._instruction

    async def next_turn(self, last_opposing_turn: str | None) -> GenerationResult:
        if last_opposing_turn is None:
            raise ValueError("the counter-agent never speaks first")
        return await self._generator.generate(
            role=self.role,
            system_instruction=self._instruction,
            prompt=last_opposing_turn,
            temperature=self._temperature,
        )


class ParticipantFactory:
    """Builds the pair of participants for one session."""

    def __init__(
        self,
        scripted_instructions: str,
        profiles: ProfileRepository,
        generator: Generator,
        opening_prompt: str,
    ) -> None:
        self._scripted_instructions = scripted_instructions
        self._profiles = profiles
        self._generator = generator
        self._opening_prompt = opening_prompt

    def create(
        self, profile_id: str, temperature: float | None = None
    ) -> dict[Role, Participant]:
        """Raises ProfileNotFoundError if the profile does not exist."""
        profile = self._profiles.get(profile_id)
        return {
            Role.SCRIPTED: ScriptedParticipant(
                instructions=self._scripted_instructions,
                generator=self._generator,
                opening_prompt=self._opening_prompt,
                temperature=temperature,
            ),
            Role.COUNTER_AGENT: CounterAgentParticipant(
                profile=profile,
                generator=self._generator,
                temperature=temperature,
            ),
        }
