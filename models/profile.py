"""Fashion profile record."""

from dataclasses import dataclass, field
from typing import List


@dataclass
class Profile:
    """A user's fashion profile, keyed by email."""

    name: str = ""
    email: str = ""
    body_type: str = ""
    skin_tone: str = ""
    preferred_colors: List[str] = field(default_factory=list)
    vibe: str = ""
    location: str = ""
