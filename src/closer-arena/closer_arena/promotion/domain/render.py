"""Rendering promoted tactics into the scripted agent's instructions."""

from closer_arena.promotion.domain.tactic import Tactic

PROMOTED_SECTION_HEADER = "## Promoted Tactics"


def render_promoted_instructions(base_instructions: str, tactics: list[Tactic]) -> str:
    """Append tactics, highest priority first, below the base instructions.

    Any previously rendered section is replaced, so rendering is idempotent.
    """
    base = base_instructions.split(PROMOTED_SECTION_HEADER, 1)[0].rstrip()
    if not tactics:
        return base + "\n"
    ordered = sorted(tactics, key=lambda t: (-t.priority, -t.composite_score, t.tactic_id))
    lines = [
        f"{i}. {' '.join(tactic.text.split())}" for i, tactic in enumerate(ordered, start=1)
    ]
    return (
        f"{base}\n\n{PROMOTED_SECTION_HEADER}\n\n"
        "Lines that won real negotiations. Reuse their reasoning, not their wording.\n\n"
        + "\n".join(lines)
        + "\n"
    )
