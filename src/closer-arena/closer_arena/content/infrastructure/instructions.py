"""Scripted agent base instructions, read from a text file."""

from pathlib import Path

from closer_arena.content.domain.errors import ContentLoadError


def load_scripted_instructions(path: Path) -> str:
    """Return the stripped file contents.

    Raises:
        ContentLoadError: if the file is missing, unreadable or empty.
    """
    try:
        text = path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise ContentLoadError(path=path, reason=str(exc)) from exc
    if not text:
        raise ContentLoadError(path=path, reason="file is empty")
    return text
