"""Token usage extraction from LiteLLM responses."""

from closer_arena.generation.domain.usage import UsageMetrics


def usage_from_response(response: object) -> UsageMetrics:
    """Read prompt/completion token counts, treating anything missing as zero."""
    usage = getattr(response, "usage", None)
    input_tokens = getattr(usage, "prompt_tokens", None)
    output_tokens = getattr(usage, "completion_tokens", None)
    return UsageMetrics(
        input_tokens=input_tokens if isinstance(input_tokens, int) else 0,
        output_tokens=output_tokens if isinstance(output_tokens, int) else 0,
    )
