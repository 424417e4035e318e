"""Atomic writes of the promoted instructions file."""

import os
from pathlib import Path

from closer_arena.content.domain.errors import ContentWriteError


def write_instructions(path: Path, text: str) -> None:
    """Write via a sibling temp file and rename, so readers never see a partial file.

    Raises:
        ContentWriteError: if the file cannot be written.
    """
    tmp = path.with_name(f".{path.name}.tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(text, encoding="utf-8")
        os.replace(tmp, path)
    except OSError as exc:
        raise ContentWriteError(path=path, reason=str(exc)) from exc
