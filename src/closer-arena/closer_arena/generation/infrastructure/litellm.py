"""LiteLLMGenerator — turn generation for both roles via LiteLLM."""

import time

import litellm

from closer_arena.config.domain.generation import GenerationConfig
from closer_arena.generation.domain.observer import GenerationObserver
from closer_arena.generation.domain.result import GenerationResult
from closer_arena.generation.domain.role import Role
from closer_arena.generation.infrastructure.errors import GenerationError
from closer_arena.generation.infrastructure.usage import usage_from_response


class LiteLLMGenerator:
    """Generator that routes each role to its configured model.

    A single instance is shared by every session; it holds no per-session state.

    Does NOT inherit from Generator (structural typing via Protocol).
    """

    def __init__(self, config: GenerationConfig, observer: GenerationObserver) -> None:
        litellm.suppress_debug_info = True
        self._config = config
        self._observer = observer
        self._models = {
            Role.SCRIPTED: config.scripted_model,
            Role.COUNTER_AGENT: config.counter_agent_model,
        }

    async def generate(
        self,
        role: Role,
        system_instruction: str,
        prompt: str,
        temperature: float | None = None,
    ) -> GenerationResult:
        """Invoke the role's model once and return its reply with usage.

        Raises:
            GenerationError: if the call fails or the reply is empty.
        """
        model = self._models[role]
        self._observer.generation_started(role=role, model=model)

        start = time.monotonic()
        try:
            response = await litellm.acompletion(
                model=model,
                temperature=(
                    temperature if temperature is not None else self._config.temperature
                ),
                messages=[
                    {"role": "system", "content": system_instruction},
                    {"role": "user", "content": prompt},
                ],
            )
            text = response.choices[0].message.content
        except Exception as exc:
            reason = str(exc)
            self._observer.generation_failed(role=role, model=model, reason=reason)
            raise GenerationError(role=role, reason=reason) from exc

        duration_ms = int((time.monotonic() - start) * 1000)

        if not isinstance(text, str) or not text.strip():
            reason = "model returned an empty reply"
            self._observer.generation_failed(role=role, model=model, reason=reason)
            raise GenerationError(role=role, reason=reason)

        usage = usage_from_response(response)
        self._observer.generation_completed(
            role=role,
            model=model,
            duration_ms=duration_ms,
            input_tokens=usage.input_tokens,
            output_tokens=usage.output_tokens,
        )
        return GenerationResult(
            text=text.strip(), model=model, usage=usage, duration_ms=duration_ms
        )
