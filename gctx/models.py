from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ContextState:
    """Snapshot of which profile is active and which one was left last"""
    active: Optional[str] = None
    previous: Optional[str] = None
