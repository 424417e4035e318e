"""FakeGenerator — scripted Generator implementation for use in tests."""

from dataclasses import dataclass

from closer_arena.generation.domain.result import GenerationResult
from closer_arena.generation.domain.role import Role
from closer_arena.generation.domain.usage import UsageMetrics


@dataclass(frozen=True)
class GenerateCall:
    role: Role
    system_instruction: str
    prompt: str
    temperature: float | None


class FakeGenerator:
    """Satisfies the Generator protocol.

    Every reply uses the same token usage, so each turn has a predictable
    cost. ``fail_on_call`` maps a 0-based call number to the exception that
    call raises instead of replying.
    """

    def __init__(
        self,
        input_tokens: int = 100,
        output_tokens: int = 50,
        model: str = "gpt-4o",
        fail_on_call: dict[int, Exception] | None = None,
    ) -> None:
        self._usage = UsageMetrics(input_tokens=input_tokens, output_tokens=output_tokens)
        self._model = model
        self._fail_on_call = fail_on_call if fail_on_call is not None else {}
        self._calls: list[GenerateCall] = []

    @property
    def calls(self) -> list[GenerateCall]:
        return self._calls

    async def generate(
        self,
        role: Role,
        system_instruction: str,
        prompt: str,
        temperature: float | None = None,
    ) -> GenerationResult:
        call_number = len(self._calls)
        self._calls.append(
            GenerateCall(
                role=role,
                system_instruction=system_instruction,
                prompt=prompt,
                temperature=temperature,
            )
        )
        if call_number in self._fail_on_call:
            raise self._fail_on_call[call_number]
        return GenerationResult(
            text=f"{role} reply {call_number}",
            model=self._model,
            usage=self._usage,
            duration_ms=10,
        )
