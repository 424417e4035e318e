"""Turn value object — one utterance in a session transcript."""

from pydantic import BaseModel, ConfigDict, Field

from closer_arena.generation.domain.role import Role


class Turn(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0)
    role: Role
    text: str
    cost_usd: float = Field(default=0.0, ge=0.0)

    def render(self) -> str:
        return f"{self.role.transcript_label}: {self.text}"
