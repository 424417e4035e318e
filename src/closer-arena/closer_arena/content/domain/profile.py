"""CounterAgentProfile — a generated persona the scripted agent must win over."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

type ProfileId = str
type DialName = str


class CounterAgentProfile(BaseModel):
    """Immutable description of one counter-agent.

    ``dials`` are behavioral settings in [0, 1] (skepticism, urgency, ...).
    A profile is never changed once a session references it, which is what
    makes caching it safe.
    """

    model_config = ConfigDict(frozen=True)

    profile_id: ProfileId = Field(min_length=1)
    name: str = Field(min_length=1)
    instructions: str = Field(min_length=1)
    dials: dict[DialName, float] = Field(default_factory=dict)

    @field_validator("dials")
    @classmethod
    def _dials_in_unit_range(cls, dials: dict[DialName, float]) -> dict[DialName, float]:
        out_of_range = sorted(name for name, value in dials.items() if not 0.0 <= value <= 1.0)
        if out_of_range:
            raise ValueError(f"dials must be within [0, 1]: {', '.join(out_of_range)}")
        return dials

    def render_system_instruction(self) -> str:
        if not self.dials:
            return self.instructions
        dial_lines = "\n".join(
            f"- {name}: {value:.2f}" for name, value in sorted(self.dials.items())
        )
        return (
            f"{self.instructions}\n\n"
            f"## Behavioral dials (0 = low, 1 = high)\n{dial_lines}"
        )
