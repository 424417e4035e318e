"""Record store configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel


class StoreConfig(BaseModel, frozen=True):
    type: Literal["jsonl", "memory"] = "jsonl"
    path: Path = Path(".closer-arena")
