"""Generation model configuration for both sides of a session."""

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_OPENING_PROMPT = (
    "Start the conversation. Introduce yourself and begin the 5-step process."
)


class GenerationConfig(BaseModel, frozen=True):
    """Models and sampling for the scripted agent and the counter-agent.

    scripted_instructions_path points at the scripted agent's base instructions.
    The opening prompt stands in for the opposing turn on the very first turn.
    """

    scripted_model: str = "gpt-4o"
    counter_agent_model: str = "gpt-4o-mini"
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    scripted_instructions_path: Path
    opening_prompt: str = DEFAULT_OPENING_PROMPT
